import unittest

from atomlab.equations import HEADER, format_equations
from atomlab.inventory import InsufficientAtomsError, Inventory


class TestInventory(unittest.TestCase):
    def test_add_atom(self):
        inventory = Inventory()
        self.assertEqual(inventory.add_atom("H"), 1)
        self.assertEqual(inventory.add_atom("H"), 2)
        self.assertEqual(inventory["H"], 2)
        self.assertEqual(inventory["O"], 0)
        self.assertNotIn("O", inventory)

    def test_consume_prunes_zero_entries(self):
        inventory = Inventory({"H": 2, "O": 1})
        inventory.consume({"H": 2, "O": 1})
        self.assertEqual(len(inventory), 0)
        self.assertEqual(inventory, {})

    def test_consume_beyond_available_raises_without_mutating(self):
        inventory = Inventory({"H": 3, "O": 0})
        with self.assertRaises(InsufficientAtomsError):
            inventory.consume({"H": 2, "O": 1})
        self.assertEqual(inventory.snapshot(), {"H": 3})

    def test_clear(self):
        inventory = Inventory({"Na": 1, "Cl": 4})
        inventory.clear()
        self.assertEqual(inventory.snapshot(), {})

    def test_rejects_negative_counts(self):
        with self.assertRaises(ValueError):
            Inventory({"H": -1})


class TestFormatEquations(unittest.TestCase):
    def test_selected_ids(self):
        text = format_equations({1, 2})
        self.assertEqual(text, "Reaction Equation(s):\n2H2 + O2 == 2(H2O)\nC + O2 == CO2")
        self.assertNotIn("HCl", text)

    def test_duplicates_collapse_and_order_is_sorted(self):
        text = format_equations([5, 0, 5, 0])
        self.assertEqual(text.splitlines(), [HEADER, "H2 + Cl2 == 2(HCl)", "O2↑"])

    def test_unknown_id(self):
        self.assertEqual(format_equations({99}).splitlines(), [HEADER, "Unknown Equation"])

    def test_empty(self):
        self.assertEqual(format_equations(set()), HEADER)


if __name__ == '__main__':
    unittest.main()
