from datetime import date, timedelta
import unittest
from fastapi.testclient import TestClient
from foodwaste.api.api_run import create_app
from foodwaste.domain.Grocery import Grocery

PANCAKES = {
    'name': 'Pancakes',
    'description': 'Thin pancakes',
    'process': 'Whisk, rest and fry',
    'ingredients': {
        'Milk': {'amount': 3, 'unit': 'dl'},
        'Egg': {'amount': 2, 'unit': 'stk'},
        'Flour': {'amount': 200, 'unit': 'g'},
    },
}


class TestRecipesAPI(unittest.TestCase):

    def setUp(self):
        self.app = create_app()
        self.client = TestClient(self.app)
        self.storage = self.app.state.storage
        soon = date.today() + timedelta(days=4)
        self.storage.register(Grocery('Milk', 20.0, 1, 'l', soon))
        self.storage.register(Grocery('Flour', 0.02, 1, 'kg', soon))

    def test_add_and_list(self):
        resp = self.client.post('/api/recipes', json=PANCAKES)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()['recipe']['ingredients']['Milk'], {'amount': 0.3, 'unit': 'l'})
        data = self.client.get('/api/recipes').json()
        self.assertEqual(data['count'], 1)

    def test_duplicate_recipe(self):
        self.client.post('/api/recipes', json=PANCAKES)
        resp = self.client.post('/api/recipes', json=dict(PANCAKES, name='pancakes'))
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()['kind'], 'DuplicateRecipe')

    def test_invalid_recipe(self):
        resp = self.client.post('/api/recipes', json=dict(PANCAKES, ingredients={}))
        self.assertEqual(resp.status_code, 422)
        bad_unit = dict(PANCAKES, ingredients={'Milk': {'amount': 3, 'unit': 'cup'}})
        resp = self.client.post('/api/recipes', json=bad_unit)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['kind'], 'UnsupportedUnit')

    def test_detail_reports_missing(self):
        self.client.post('/api/recipes', json=PANCAKES)
        data = self.client.get('/api/recipes/PANCAKES').json()
        self.assertFalse(data['can_make'])
        self.assertEqual(data['missing'], [{'name': 'Egg', 'amount': 2.0, 'unit': 'stk'}])

        self.storage.register(Grocery('Egg', 3.0, 6, 'stk', date.today() + timedelta(days=10)))
        data = self.client.get('/api/recipes/pancakes').json()
        self.assertTrue(data['can_make'])
        self.assertEqual(data['missing'], [])

    def test_unknown_recipe(self):
        resp = self.client.get('/api/recipes/Lasagna')
        self.assertEqual(resp.status_code, 404)

    def test_available(self):
        self.client.post('/api/recipes', json=PANCAKES)
        self.client.post('/api/recipes', json={
            'name': 'Porridge', 'description': 'Oat porridge', 'process': 'Boil',
            'ingredients': {'Milk': {'amount': 5, 'unit': 'dl'}},
        })
        data = self.client.get('/api/recipes/available').json()
        self.assertEqual(data['total'], 2)
        self.assertEqual([r['name'] for r in data['recipes']], ['Porridge'])
