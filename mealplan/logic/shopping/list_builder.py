"""Shopping ingredients from planned meals.

Provides collect_shopping_items(weekly_plan, selections, skip_completed=False).
The grocery feature does its own ingredient parsing, so items are handed over
verbatim as strings.
"""
from typing import Iterable, List, Optional, Tuple

from mealplan.logic.planning.normalize import normalize_weekly_plan
from mealplan.utilities.constants import MEAL_TYPES, VARIANTS

Selection = Tuple[str, str, str]  # (date, variant, meal_type)


def all_slots(dates: Iterable[str], variants: Iterable[str] = VARIANTS) -> List[Selection]:
    """Every (date, variant, meal_type) combination for the given dates."""
    return [(d, v, mt) for d in dates for v in variants for mt in MEAL_TYPES]


def collect_shopping_items(weekly_plan, selections: Optional[Iterable[Selection]] = None, *,
                           skip_completed: bool = False) -> List[str]:
    """Flatten the items of the selected slots, in selection order.

    Args:
        weekly_plan: WeeklyPlan or raw stored plan.
        selections: (date, variant, meal_type) triples; None means every slot of every planned date.
        skip_completed: If True, slots already marked eaten are ignored.

    Returns:
        List of item strings exactly as planned (repeats kept).
    """
    plan = normalize_weekly_plan(weekly_plan)
    if selections is None:
        selections = all_slots(plan.dates())

    items: List[str] = []
    for date, variant, meal_type in selections:
        if variant not in VARIANTS or meal_type not in MEAL_TYPES:
            continue
        slot = plan.get(date).slot(variant, meal_type)
        if skip_completed and slot.completed:
            continue
        items.extend(slot.items)
    return items


__all__ = ['collect_shopping_items', 'all_slots']
