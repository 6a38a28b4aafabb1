"""Normalization of stored meal-plan data into the canonical model.

Stored slots have gone through several shapes over time:

    "Oatmeal"                              legacy single string
    ["Bread", "Stew"]                      legacy string list
    {"items": [...], "protein": 20, ...}   slot object (older ones lack completed/prepNotes)

and days either as flat ``{breakfast, lunch, dinner, snacks}`` keys (before the
kids variant existed) or as ``{"adult": {...}, "kids": {...}}``.

Each raw value is classified once into a shape tag, and every tag has exactly
one conversion. All functions here are total: anything unrecognized becomes
an empty default. Normalizing canonical data returns an equal value.
"""
import math
from enum import Enum
from typing import Any, Dict, List, Optional

from mealplan.domain.DayPlan import DayPlan
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.WeeklyPlan import WeeklyPlan
from mealplan.utilities.constants import MEAL_TYPES


class SlotShape(Enum):
    EMPTY = "empty"
    CANONICAL = "canonical"
    SLOT_OBJECT = "slot_object"
    LEGACY_ARRAY = "legacy_array"
    LEGACY_STRING = "legacy_string"
    UNKNOWN = "unknown"


class DayShape(Enum):
    EMPTY = "empty"
    CANONICAL = "canonical"
    VARIANTS = "variants"
    LEGACY_FLAT = "legacy_flat"


def slot_shape(raw: Any) -> SlotShape:
    if raw is None or (isinstance(raw, str) and not raw):
        return SlotShape.EMPTY
    if isinstance(raw, MealSlot):
        return SlotShape.CANONICAL
    if isinstance(raw, dict):
        return SlotShape.SLOT_OBJECT if "items" in raw else SlotShape.UNKNOWN
    if isinstance(raw, (list, tuple)):
        return SlotShape.LEGACY_ARRAY
    if isinstance(raw, str):
        return SlotShape.LEGACY_STRING
    return SlotShape.UNKNOWN


def day_shape(raw: Any) -> DayShape:
    if isinstance(raw, DayPlan):
        return DayShape.CANONICAL
    if not isinstance(raw, dict) or not raw:
        return DayShape.EMPTY
    if "adult" in raw or "kids" in raw:
        return DayShape.VARIANTS
    return DayShape.LEGACY_FLAT


def _clean_items(values: Any) -> List[str]:
    if not isinstance(values, (list, tuple)):
        return []
    return [v for v in values if isinstance(v, str)]


def _clean_protein(value: Any) -> Optional[float]:
    # bool is an int subclass; a stray True is not 1 gram
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < 0:  # NaN, infinity or negative
        return None
    return value


def _clean_notes(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _from_slot_object(raw: Dict[str, Any]) -> MealSlot:
    notes = raw.get("prepNotes", raw.get("prep_notes"))
    return MealSlot(
        items=_clean_items(raw.get("items")),
        protein=_clean_protein(raw.get("protein")),
        completed=raw.get("completed") is True,
        prep_notes=_clean_notes(notes),
    )


_SLOT_CONVERTERS = {
    SlotShape.EMPTY: lambda raw: MealSlot(),
    SlotShape.CANONICAL: lambda raw: raw.copy(),
    SlotShape.SLOT_OBJECT: _from_slot_object,
    SlotShape.LEGACY_ARRAY: lambda raw: MealSlot(items=_clean_items(raw)),
    SlotShape.LEGACY_STRING: lambda raw: MealSlot(items=[raw]),
    SlotShape.UNKNOWN: lambda raw: MealSlot(),
}


def normalize_meal_slot(raw: Any) -> MealSlot:
    """Convert any stored slot representation into a canonical MealSlot (never None)."""
    return _SLOT_CONVERTERS[slot_shape(raw)](raw)


def _normalize_variant(raw: Any) -> Dict[str, MealSlot]:
    if not isinstance(raw, dict):
        return {}
    return {mt: normalize_meal_slot(raw[mt]) for mt in MEAL_TYPES if mt in raw}


def normalize_day_plan(raw: Any) -> DayPlan:
    """Convert any stored day representation into a canonical DayPlan.

    Legacy flat days become adult-only plans; kids data is never invented.
    """
    shape = day_shape(raw)
    if shape is DayShape.EMPTY:
        return DayPlan()
    if shape is DayShape.CANONICAL:
        return DayPlan(
            adult={mt: normalize_meal_slot(s) for mt, s in raw.adult.items() if mt in MEAL_TYPES},
            kids={mt: normalize_meal_slot(s) for mt, s in raw.kids.items() if mt in MEAL_TYPES},
        )
    if shape is DayShape.VARIANTS:
        return DayPlan(adult=_normalize_variant(raw.get("adult")),
                       kids=_normalize_variant(raw.get("kids")))
    adult = {mt: normalize_meal_slot(raw[mt]) for mt in MEAL_TYPES
             if raw.get(mt) not in (None, "")}
    return DayPlan(adult=adult)


def normalize_weekly_plan(raw: Any) -> WeeklyPlan:
    if isinstance(raw, WeeklyPlan):
        raw = raw.days
    if not isinstance(raw, dict):
        return WeeklyPlan()
    return WeeklyPlan({date: normalize_day_plan(day) for date, day in raw.items()
                       if isinstance(date, str)})


def variant_slots(raw: Any) -> Dict[str, MealSlot]:
    """Normalize a single variant mapping (e.g. ``day["adult"]``) into mealType -> MealSlot."""
    return _normalize_variant(raw)


__all__ = [
    'SlotShape', 'DayShape', 'slot_shape', 'day_shape',
    'normalize_meal_slot', 'normalize_day_plan', 'normalize_weekly_plan', 'variant_slots',
]
