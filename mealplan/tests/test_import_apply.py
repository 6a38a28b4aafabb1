import unittest
from mealplan.logic.importing.apply import apply_parsed_plan, date_for_day_index
from mealplan.logic.importing.text_parser import parse_meal_plan_text

WEEK_START = "2025-03-03"  # a Monday


class TestDateForDayIndex(unittest.TestCase):

    def test_monday_week(self):
        self.assertEqual(date_for_day_index(WEEK_START, 1), "2025-03-03")
        self.assertEqual(date_for_day_index(WEEK_START, 6), "2025-03-08")
        # Sunday closes a Monday-started week
        self.assertEqual(date_for_day_index(WEEK_START, 0), "2025-03-09")


class TestApplyParsedPlan(unittest.TestCase):

    def test_both_and_variant_entries(self):
        parsed = parse_meal_plan_text("Monday:\nBreakfast: Oatmeal, Toast\nKids Lunch: Chicken Nuggets")
        plan, imported = apply_parsed_plan({}, parsed, WEEK_START)
        self.assertEqual(imported, 1)
        day = plan.get("2025-03-03")
        self.assertEqual(day.adult["breakfast"].items, ["Oatmeal", "Toast"])
        self.assertEqual(day.kids["breakfast"].items, ["Oatmeal", "Toast"])
        self.assertEqual(day.kids["lunch"].items, ["Chicken Nuggets"])
        self.assertNotIn("lunch", day.adult)

    def test_apply_both_variants_flag(self):
        parsed = parse_meal_plan_text("Tuesday\nKids Dinner: Pasta\n")
        plan, _ = apply_parsed_plan({}, parsed, WEEK_START, apply_both_variants=True)
        day = plan.get("2025-03-04")
        self.assertEqual(day.adult["dinner"].items, ["Pasta"])
        self.assertEqual(day.kids["dinner"].items, ["Pasta"])

    def test_week_is_reset_but_other_weeks_kept(self):
        existing = {
            "2025-03-05": {"adult": {"dinner": {"items": ["Old Stew"], "completed": True}}, "kids": {}},
            "2025-03-10": {"dinner": "Next week"},
        }
        parsed = parse_meal_plan_text("Monday\nDinner: Tacos\n")
        plan, _ = apply_parsed_plan(existing, parsed, WEEK_START)
        self.assertTrue(plan.get("2025-03-05").is_empty())
        self.assertIn("2025-03-05", plan)
        self.assertEqual(plan.get("2025-03-10").adult["dinner"].items, ["Next week"])

    def test_repeated_meal_lines_append(self):
        parsed = parse_meal_plan_text("Friday\nDinner: Fish\nDinner: Chips\n")
        plan, _ = apply_parsed_plan({}, parsed, WEEK_START)
        self.assertEqual(plan.get("2025-03-07").adult["dinner"].items, ["Fish", "Chips"])

    def test_bad_day_entries_are_skipped(self):
        parsed = [{"day_index": 9, "meals": {"dinner": [{"variant": "both", "items": ["X"]}]}},
                  {"day_index": "1", "meals": {}}]
        plan, imported = apply_parsed_plan({}, parsed, WEEK_START)
        self.assertEqual(imported, 0)
        self.assertEqual(len(plan), 7)

    def test_invalid_week_start(self):
        plan, imported = apply_parsed_plan({"2025-03-03": {"dinner": "Soup"}}, [], "not-a-date")
        self.assertEqual(imported, 0)
        self.assertEqual(plan.get("2025-03-03").adult["dinner"].items, ["Soup"])


if __name__ == '__main__':
    unittest.main()
