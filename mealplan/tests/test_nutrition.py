import unittest
from mealplan.domain.Recipe import Recipe
from mealplan.logic.reporting.nutrition import calculate_day_protein, compute_week_protein

RECIPES = [
    Recipe("Grilled Chicken", protein=15),
    Recipe("Green Salad"),
    {"name": "Lentil Soup", "protein": 18.4},
]


class TestDayProtein(unittest.TestCase):

    def test_override_plus_recipe_lookup(self):
        adult = {
            "breakfast": {"items": ["Oatmeal"], "protein": 20},
            "lunch": {"items": ["Grilled Chicken", "Green Salad"]},
        }
        self.assertEqual(calculate_day_protein(adult, RECIPES), 35)

    def test_override_replaces_recipe_sum_for_that_slot_only(self):
        adult = {
            "lunch": {"items": ["Grilled Chicken"], "protein": 5},
            "dinner": ["Grilled Chicken"],
        }
        self.assertEqual(calculate_day_protein(adult, RECIPES), 20)

    def test_zero_override_counts(self):
        self.assertEqual(calculate_day_protein({"dinner": {"items": ["Grilled Chicken"], "protein": 0}}, RECIPES), 0)

    def test_unmatched_and_case_sensitive_names_add_nothing(self):
        adult = {"dinner": ["grilled chicken", "Mystery Stew"]}
        self.assertEqual(calculate_day_protein(adult, RECIPES), 0)

    def test_result_is_rounded(self):
        self.assertEqual(calculate_day_protein({"lunch": "Lentil Soup"}, RECIPES), 18)

    def test_non_finite_recipe_protein_counts_as_zero(self):
        recipes = [Recipe("Endless Stew", protein=float("inf")), {"name": "Mystery Pie", "protein": float("nan")}]
        self.assertEqual(calculate_day_protein({"dinner": ["Endless Stew", "Mystery Pie"]}, recipes), 0)

    def test_empty_or_missing_inputs(self):
        self.assertEqual(calculate_day_protein({}, RECIPES), 0)
        self.assertEqual(calculate_day_protein(None, RECIPES), 0)
        self.assertEqual(calculate_day_protein({"lunch": ["Grilled Chicken"]}, None), 0)


class TestWeekProtein(unittest.TestCase):

    def test_week_total_uses_adult_variant(self):
        days = [
            {"date": "2025-03-03", "plan": {"adult": {"dinner": ["Grilled Chicken"]},
                                            "kids": {"dinner": ["Grilled Chicken"]}}},
            {"date": "2025-03-04", "plan": {"lunch": {"items": ["Soup"], "protein": 12}}},
            {"date": "2025-03-05", "plan": None},
        ]
        result = compute_week_protein(days, RECIPES)
        self.assertEqual(result["days"], {"2025-03-03": 15, "2025-03-04": 12, "2025-03-05": 0})
        self.assertEqual(result["week_total"], 27)


if __name__ == '__main__':
    unittest.main()
