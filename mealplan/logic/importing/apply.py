"""Applying parsed text imports to a week of the plan."""
from datetime import timedelta
from typing import List, Tuple

from mealplan.domain.DayPlan import DayPlan
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.WeeklyPlan import WeeklyPlan
from mealplan.logic.planning.normalize import normalize_weekly_plan
from mealplan.utilities.constants import BOTH_VARIANTS, MEAL_TYPES, VARIANTS
from mealplan.utilities.dates import DateLike, format_iso, js_weekday, parse_iso, week_dates


def date_for_day_index(week_start: DateLike, day_index: int) -> str:
    """Date within the week starting at ``week_start`` that falls on ``day_index`` (Sunday=0)."""
    start = parse_iso(week_start)
    offset = (day_index - js_weekday(start)) % 7
    return format_iso(start + timedelta(days=offset))


def _append(day: DayPlan, variant: str, meal_type: str, items: List[str]) -> None:
    slots = day.variant(variant)
    current = slots.get(meal_type) or MealSlot()
    slots[meal_type] = MealSlot(items=current.items + list(items))


def apply_parsed_plan(weekly_plan, parsed: List[dict], week_start: DateLike,
                      apply_both_variants: bool = False) -> Tuple[WeeklyPlan, int]:
    """Replace the target week with the parsed days.

    Every date of the week is reset first so meals from an earlier plan do not
    linger in the prep schedule. Returns the new plan and the number of parsed
    days applied.
    """
    plan = normalize_weekly_plan(weekly_plan)
    if parse_iso(week_start) is None:
        return plan, 0
    for date in week_dates(week_start):
        plan.set(date, DayPlan())

    imported = 0
    for parsed_day in parsed or []:
        day_index = parsed_day.get('day_index')
        if not isinstance(day_index, int) or not 0 <= day_index <= 6:
            continue
        day = plan.get(date_for_day_index(week_start, day_index))
        meals = parsed_day.get('meals') or {}
        for meal_type in MEAL_TYPES:
            for entry in meals.get(meal_type) or []:
                items = [i for i in entry.get('items') or [] if isinstance(i, str) and i]
                if not items:
                    continue
                variant = entry.get('variant', BOTH_VARIANTS)
                if apply_both_variants or variant == BOTH_VARIANTS:
                    targets = VARIANTS
                elif variant in VARIANTS:
                    targets = (variant,)
                else:
                    continue
                for target in targets:
                    _append(day, target, meal_type, items)
        plan.set(date_for_day_index(week_start, day_index), day)
        imported += 1
    return plan, imported


__all__ = ['apply_parsed_plan', 'date_for_day_index']
