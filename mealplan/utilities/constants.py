from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"

MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner", "snacks")
# Snacks are shown between lunch and dinner
DISPLAY_MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "snacks", "dinner")
VARIANTS: Final[tuple[str, ...]] = ("adult", "kids")
BOTH_VARIANTS: Final[str] = "both"

# Index matches the JS-style weekday numbering used by imports (Sunday=0)
DAY_NAMES: Final[tuple[str, ...]] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"
)

MEAL_TYPE_ALIASES: Final[dict[str, str]] = {
    "breakfast": "breakfast",
    "bfast": "breakfast",
    "morning": "breakfast",
    "lunch": "lunch",
    "afternoon": "lunch",
    "dinner": "dinner",
    "supper": "dinner",
    "evening": "dinner",
    "snacks": "snacks",
    "snack": "snacks",
}

MEAL_PLAN_WIDGET_ID: Final[str] = "meal-plan"
BEFORE_WEEK: Final[str] = "before-week"
DEFAULT_PREP_INSTRUCTIONS: Final[str] = "Prep required"

MEAL_SUGGESTIONS: Final[dict[str, list[str]]] = {
    "breakfast": ["Oatmeal", "Eggs & Toast", "Pancakes", "Smoothie", "Cereal", "Yogurt & Fruit"],
    "lunch": ["Sandwich", "Salad", "Soup", "Leftovers", "Wrap", "Rice Bowl"],
    "dinner": ["Pasta", "Grilled Chicken", "Stir Fry", "Tacos", "Pizza", "Fish & Veggies"],
    "snacks": ["Fruit", "Nuts", "Cheese & Crackers", "Veggies & Dip", "Popcorn", "Trail Mix"],
}
