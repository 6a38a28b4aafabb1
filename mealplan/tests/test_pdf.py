import unittest
from mealplan.infra.Plan_Store import PlanStore
from mealplan.infra.Recipe_Repository import StaticRecipeRepository
from mealplan.infra.Widget_Storage import InMemoryWidgetStorage
from mealplan.infra.pdf_utils import generate_week_pdf
from mealplan.events.Event_Bus import EventBus


class TestWeekPdf(unittest.TestCase):

    def test_generates_pdf_with_kids_and_prep(self):
        storage = InMemoryWidgetStorage({"m1": {"meal-plan": {"weeklyPlan": {
            "2025-03-03": {"adult": {"dinner": {"items": ["Chili & Rice"], "prepNotes": "Soak <beans>"}},
                           "kids": {"lunch": ["Nuggets"]}},
        }}}})
        store = PlanStore(storage, "m1", StaticRecipeRepository([{"name": "Chili & Rice", "protein": 20}]),
                          EventBus(), kids_menu_enabled=True)
        pdf = generate_week_pdf(store.week_days("2025-03-03"), store.week_prep_schedule("2025-03-03"),
                                include_kids=True)
        self.assertIsInstance(pdf, bytes)
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_empty_week(self):
        self.assertTrue(generate_week_pdf([]).startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
