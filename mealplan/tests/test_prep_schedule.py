import unittest
from mealplan.domain.Recipe import Recipe
from mealplan.logic.prep.schedule import derive_prep_schedule, is_prep_completed, meals_needing_prep
from mealplan.utilities.constants import BEFORE_WEEK, DEFAULT_PREP_INSTRUCTIONS

RECIPES = [
    Recipe("Black Bean Chili", protein=22, requires_prep=True, prep_instructions="Soak beans overnight"),
    Recipe("Overnight Oats", protein=10, requires_prep=True),
    Recipe("Toast", protein=4),
]

DATES = ["2025-03-03", "2025-03-04", "2025-03-05", "2025-03-06", "2025-03-07", "2025-03-08", "2025-03-09"]


def _week(plans=None):
    plans = plans or {}
    return [{"date": d, "short_name": f"D{i}", "date_num": int(d[-2:]), "plan": plans.get(i)}
            for i, d in enumerate(DATES)]


class TestDerivePrepSchedule(unittest.TestCase):

    def test_custom_note_and_recipe_in_same_slot_give_two_items(self):
        days = _week({2: {"adult": {"dinner": {"items": ["Black Bean Chili"], "prepNotes": "Chop onions"}}}})
        schedule = derive_prep_schedule(days, RECIPES)
        self.assertEqual(list(schedule), [DATES[1]])
        items = schedule[DATES[1]]["items"]
        self.assertEqual(len(items), 2)
        self.assertEqual(items[0].unique_key, f"custom:{DATES[2]}:dinner:adult")
        self.assertTrue(items[0].is_custom_note)
        self.assertEqual(items[0].recipe_name, "Black Bean Chili")
        self.assertEqual(items[0].prep_instructions, "Chop onions")
        self.assertEqual(items[1].unique_key, "recipe:Black Bean Chili")
        self.assertEqual(items[1].prep_instructions, "Soak beans overnight")

    def test_prep_is_bucketed_the_day_before(self):
        days = _week({3: {"dinner": ["Black Bean Chili"]}})
        schedule = derive_prep_schedule(days, RECIPES)
        bucket = schedule[DATES[2]]
        self.assertEqual(bucket["day_name"], "D2")
        self.assertEqual(bucket["date_num"], 5)
        self.assertEqual(bucket["for_day"], "D3")
        self.assertEqual(bucket["for_date_num"], 6)
        self.assertEqual(bucket["for_date"], DATES[3])

    def test_first_day_buckets_before_week(self):
        schedule = derive_prep_schedule(_week({0: {"breakfast": ["Overnight Oats"]}}), RECIPES)
        self.assertEqual(list(schedule), [BEFORE_WEEK])
        bucket = schedule[BEFORE_WEEK]
        self.assertEqual(bucket["day_name"], "Before")
        self.assertEqual(bucket["for_date"], DATES[0])
        self.assertEqual(bucket["items"][0].prep_instructions, DEFAULT_PREP_INSTRUCTIONS)

    def test_same_recipe_in_both_variants_listed_once(self):
        days = _week({4: {"adult": {"dinner": ["Black Bean Chili"]}, "kids": {"lunch": ["Black Bean Chili"]}}})
        items = derive_prep_schedule(days, RECIPES)[DATES[3]]["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].variant, "adult")

    def test_custom_notes_are_per_variant(self):
        days = _week({1: {"adult": {"lunch": {"items": [], "prepNotes": "Marinate"}},
                          "kids": {"lunch": {"items": ["Toast"], "prepNotes": "Buy bread"}}}})
        items = derive_prep_schedule(days, RECIPES)[DATES[0]]["items"]
        self.assertEqual([i.unique_key for i in items],
                         [f"custom:{DATES[1]}:lunch:adult", f"custom:{DATES[1]}:lunch:kids"])
        # a note on an empty slot is labelled with the meal type
        self.assertEqual(items[0].recipe_name, "Lunch")
        self.assertEqual(items[1].recipe_name, "Toast")

    def test_nothing_to_prep(self):
        days = _week({2: {"dinner": ["Toast", "Unknown Dish"]}})
        self.assertEqual(derive_prep_schedule(days, RECIPES), {})
        self.assertEqual(derive_prep_schedule([], RECIPES), {})

    def test_completion_lookup(self):
        days = _week({3: {"dinner": ["Black Bean Chili"]}})
        item = derive_prep_schedule(days, RECIPES)[DATES[2]]["items"][0]
        completions = {f"{DATES[2]}:Black Bean Chili": True}
        self.assertTrue(is_prep_completed(completions, DATES[2], item))
        self.assertFalse(is_prep_completed(completions, DATES[1], item))


class TestMealsNeedingPrep(unittest.TestCase):

    def test_one_item_per_recipe(self):
        day = {"adult": {"breakfast": ["Overnight Oats", "Toast"], "dinner": ["Black Bean Chili"]},
               "kids": {"breakfast": ["Overnight Oats"]}}
        names = [i.recipe_name for i in meals_needing_prep(day, RECIPES)]
        self.assertEqual(names, ["Overnight Oats", "Black Bean Chili"])

    def test_custom_notes_are_not_alerts(self):
        day = {"adult": {"dinner": {"items": ["Toast"], "prepNotes": "Thaw"}}}
        self.assertEqual(meals_needing_prep(day, RECIPES), [])


if __name__ == '__main__':
    unittest.main()
