from datetime import date, timedelta
import unittest
from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.IngredientDetail import IngredientDetail
from foodwaste.domain.Recipe import Recipe
from foodwaste.domain.errors import InvalidAmount, InvalidArgument, NullStorage, UnsupportedUnit
from foodwaste.events.Event_Bus import EventBus


class TestIngredientDetail(unittest.TestCase):

    def test_normalized_on_construction(self):
        detail = IngredientDetail(150, "ml")
        self.assertEqual(detail.amount, 0.15)
        self.assertEqual(detail.unit, "l")
        self.assertEqual(str(IngredientDetail(1, "kg")), "1000.00 g")

    def test_set_amount_and_unit(self):
        detail = IngredientDetail(1, "stk")
        detail.set_amount_and_unit(2, "dl")
        self.assertEqual((detail.amount, detail.unit), (0.2, "l"))

    def test_invalid_detail(self):
        with self.assertRaises(InvalidAmount):
            IngredientDetail(0, "g")
        with self.assertRaises(UnsupportedUnit):
            IngredientDetail(1, "tbsp")


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.today = date.today()
        self.storage = FoodStorage(event_bus=EventBus())
        self.storage.register(Grocery("Spaghetti", 0.05, 500, "g", self.today + timedelta(days=30)))
        self.storage.register(Grocery("Beef", 0.2, 0.5, "kg", self.today + timedelta(days=2)))
        self.storage.register(Grocery("Sauce", 30.0, 0.5, "l", self.today + timedelta(days=10)))
        self.recipe = Recipe(
            "Spaghetti Bolognese",
            "Pasta with meat sauce",
            "Boil pasta, brown beef, add sauce and onion",
            {
                "Spaghetti": (200, "g"),
                "Beef": (300, "g"),
                "Sauce": IngredientDetail(150, "ml"),
                "Onion": (50, "g"),
            },
        )

    def test_ingredients_are_normalized(self):
        self.assertEqual(self.recipe.ingredients["Sauce"], IngredientDetail(0.15, "l"))
        self.assertEqual(self.recipe.ingredients["Beef"].amount, 300)

    def test_feasibility_round_trip(self):
        self.assertFalse(self.recipe.can_make(self.storage))
        self.assertEqual(self.recipe.missing_ingredients(self.storage), [("Onion", 50, "g")])

        self.storage.register(Grocery("onion", 0.01, 50, "g", self.today + timedelta(days=7)))
        self.assertTrue(self.recipe.can_make(self.storage))
        self.assertEqual(self.recipe.missing_ingredients(self.storage), [])

    def test_amount_is_pooled_across_batches(self):
        self.storage.register(Grocery("Onion", 0.01, 20, "g", self.today + timedelta(days=1)))
        self.storage.register(Grocery("Onion", 0.01, 30, "g", self.today + timedelta(days=5)))
        self.assertTrue(self.recipe.can_make(self.storage))

    def test_partial_shortfall_reported(self):
        self.storage.withdraw("beef", 400, "g")
        missing = self.recipe.missing_ingredients(self.storage)
        self.assertEqual([m.name for m in missing], ["Beef", "Onion"])
        self.assertAlmostEqual(missing[0].amount, 200)
        self.assertEqual(missing[0].unit, "g")

    def test_bound_storage_is_used_without_argument(self):
        with self.assertRaises(NullStorage):
            self.recipe.can_make()
        with self.assertRaises(NullStorage):
            self.recipe.set_storage(None)
        self.recipe.set_storage(self.storage)
        self.assertFalse(self.recipe.can_make())
        self.assertEqual(len(self.recipe.missing_ingredients()), 1)

    def test_invalid_recipe(self):
        with self.assertRaises(InvalidArgument):
            Recipe("", "desc", "process", {"Egg": (1, "stk")})
        with self.assertRaises(InvalidArgument):
            Recipe("Omelette", "123", "process", {"Egg": (1, "stk")})
        with self.assertRaises(InvalidArgument):
            Recipe("Omelette", "desc", " ", {"Egg": (1, "stk")})
        with self.assertRaises(InvalidArgument):
            Recipe("Omelette", "desc", "process", {})
        with self.assertRaises(InvalidArgument):
            Recipe("Omelette", "desc", "process", {"Egg": 3})
        with self.assertRaises(UnsupportedUnit):
            Recipe("Omelette", "desc", "process", {"Egg": (1, "dozen")})

    def test_to_dict(self):
        data = self.recipe.to_dict()
        self.assertEqual(data["name"], "Spaghetti Bolognese")
        self.assertEqual(data["ingredients"]["Sauce"], {"amount": 0.15, "unit": "l"})
