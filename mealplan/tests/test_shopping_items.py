import unittest
from mealplan.logic.shopping.list_builder import all_slots, collect_shopping_items

PLAN = {
    "2025-03-03": {"adult": {"dinner": ["Spaghetti", "2 cups flour"], "lunch": {"items": ["Soup"], "completed": True}},
                   "kids": {"dinner": ["Spaghetti"]}},
    "2025-03-04": {"breakfast": "Eggs"},
}


class TestCollectShoppingItems(unittest.TestCase):

    def test_selected_slots_in_order_with_repeats(self):
        selections = [("2025-03-03", "kids", "dinner"), ("2025-03-03", "adult", "dinner")]
        self.assertEqual(collect_shopping_items(PLAN, selections),
                         ["Spaghetti", "Spaghetti", "2 cups flour"])

    def test_default_is_every_planned_slot(self):
        self.assertEqual(collect_shopping_items(PLAN),
                         ["Soup", "Spaghetti", "2 cups flour", "Spaghetti", "Eggs"])

    def test_skip_completed(self):
        items = collect_shopping_items(PLAN, all_slots(["2025-03-03"], ["adult"]), skip_completed=True)
        self.assertEqual(items, ["Spaghetti", "2 cups flour"])

    def test_unknown_selections_ignored(self):
        selections = [("2025-03-03", "teens", "dinner"), ("2025-03-03", "adult", "brunch"),
                      ("2030-01-01", "adult", "dinner")]
        self.assertEqual(collect_shopping_items(PLAN, selections), [])

    def test_all_slots(self):
        slots = all_slots(["2025-03-03"])
        self.assertEqual(len(slots), 8)
        self.assertEqual(slots[0], ("2025-03-03", "adult", "breakfast"))


if __name__ == '__main__':
    unittest.main()
