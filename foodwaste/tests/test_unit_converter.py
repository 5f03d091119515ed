import unittest
from foodwaste.domain.errors import InvalidArgument, UnsupportedUnit
from foodwaste.utilities.unit_converter import (
    convert_unit_amount, get_standard_unit, is_compatible, normalize
)


class TestUnitConverter(unittest.TestCase):

    def test_mass_units_normalize_to_grams(self):
        self.assertEqual(normalize(2, "kg"), (2000, "g"))
        self.assertEqual(normalize(250, "g"), (250, "g"))
        self.assertAlmostEqual(normalize(500, "mg")[0], 0.5)
        self.assertEqual(normalize(500, "mg")[1], "g")

    def test_volume_units_normalize_to_liters(self):
        self.assertEqual(normalize(150, "ml"), (0.15, "l"))
        self.assertAlmostEqual(normalize(3, "dl")[0], 0.3)
        self.assertEqual(normalize(1.5, "l"), (1.5, "l"))
        self.assertEqual(get_standard_unit("ml"), "l")

    def test_count_unit_is_unchanged(self):
        self.assertEqual(normalize(6, "stk"), (6, "stk"))

    def test_units_are_case_insensitive(self):
        self.assertEqual(get_standard_unit("KG"), "g")
        self.assertEqual(convert_unit_amount(1, " Dl "), 0.1)

    def test_unknown_unit_carries_token(self):
        with self.assertRaises(UnsupportedUnit) as ctx:
            normalize(1, "cup")
        self.assertEqual(ctx.exception.unit, "cup")

    def test_blank_unit_rejected(self):
        with self.assertRaises(InvalidArgument):
            get_standard_unit("  ")
        with self.assertRaises(InvalidArgument):
            get_standard_unit(None)

    def test_unit_family_compatibility(self):
        self.assertTrue(is_compatible("kg", "mg"))
        self.assertTrue(is_compatible("dl", "l"))
        self.assertFalse(is_compatible("g", "l"))
        self.assertFalse(is_compatible("stk", "g"))
