"""Pure transforms over canonical day plans. Inputs are never mutated."""
from typing import Optional

from mealplan.domain.DayPlan import DayPlan
from mealplan.domain.MealSlot import MealSlot
from mealplan.logic.planning.normalize import normalize_day_plan, normalize_meal_slot


def clone_day_plan(plan, strip_completed: bool = False) -> DayPlan:
    """Structural copy of a day; with strip_completed every slot starts unchecked."""
    day = normalize_day_plan(plan)
    return DayPlan(
        adult={mt: s.copy(strip_completed) for mt, s in day.adult.items()},
        kids={mt: s.copy(strip_completed) for mt, s in day.kids.items()},
    )


def with_slot(plan, variant: str, meal_type: str, slot) -> DayPlan:
    """Return a copy of the day with one slot replaced, or removed when slot is None."""
    day = clone_day_plan(plan)
    slots = day.variant(variant)
    if slot is None:
        slots.pop(meal_type, None)
    else:
        slots[meal_type] = normalize_meal_slot(slot)
    return day


def with_completion_toggled(plan, variant: str, meal_type: str) -> Optional[DayPlan]:
    """Flip a slot's completed flag; None when the slot has nothing planned."""
    day = clone_day_plan(plan)
    slot = day.slot(variant, meal_type)
    if slot.is_empty():
        return None
    slot = slot.copy()
    slot.completed = not slot.completed
    day.variant(variant)[meal_type] = slot
    return day


def with_adult_copied_to_kids(plan, meal_type: str) -> Optional[DayPlan]:
    """Copy the adult items of one meal to kids. Protein stays adult-specific."""
    day = clone_day_plan(plan)
    adult = day.slot("adult", meal_type)
    if adult.is_empty():
        return None
    day.kids[meal_type] = MealSlot(items=adult.items)
    return day


def with_item_added(plan, variant: str, meal_type: str, item: str) -> Optional[DayPlan]:
    """Append an item to a slot; None when the item is blank or already present."""
    name = item.strip() if isinstance(item, str) else ""
    day = clone_day_plan(plan)
    slot = day.slot(variant, meal_type).copy()
    if not name or name in slot.items:
        return None
    slot.items.append(name)
    day.variant(variant)[meal_type] = slot
    return day


def with_item_removed(plan, variant: str, meal_type: str, index: int) -> Optional[DayPlan]:
    day = clone_day_plan(plan)
    slot = day.slot(variant, meal_type).copy()
    if not 0 <= index < len(slot.items):
        return None
    del slot.items[index]
    if slot.is_empty():
        slot.completed = False
    day.variant(variant)[meal_type] = slot
    return day
