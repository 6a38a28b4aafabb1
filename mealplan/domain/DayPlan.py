"""DayPlan domain entity: one date's meals partitioned into adult and kids variants."""
from typing import Dict, Optional

from mealplan.domain.MealSlot import MealSlot
from mealplan.utilities.constants import MEAL_TYPES, VARIANTS


class DayPlan:
    def __init__(self, adult: Optional[Dict[str, MealSlot]] = None,
                 kids: Optional[Dict[str, MealSlot]] = None):
        self.adult = dict(adult) if adult else {}
        self.kids = dict(kids) if kids else {}

    def variant(self, name: str) -> Dict[str, MealSlot]:
        if name not in VARIANTS:
            raise KeyError(name)
        return getattr(self, name)

    def slot(self, variant: str, meal_type: str) -> MealSlot:
        """Return the slot or an empty one; absence means 'not planned'."""
        return self.variant(variant).get(meal_type) or MealSlot()

    def is_empty(self) -> bool:
        """True when no slot of either variant has items."""
        for variant in VARIANTS:
            for meal_type in MEAL_TYPES:
                if not self.slot(variant, meal_type).is_empty():
                    return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, DayPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DayPlan({self.to_dict()!r})"

    def to_dict(self):
        return {
            "adult": {mt: slot.to_dict() for mt, slot in self.adult.items()},
            "kids": {mt: slot.to_dict() for mt, slot in self.kids.items()},
        }
