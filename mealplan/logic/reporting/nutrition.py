"""Protein aggregation for planned meals.

Provides calculate_day_protein(variant_slots, recipes) and compute_week_protein(days, recipes).
"""
from typing import Any, Dict, List

from mealplan.domain.Recipe import RecipeSource, index_recipes
from mealplan.logic.planning.normalize import normalize_day_plan, normalize_meal_slot
from mealplan.utilities.constants import MEAL_TYPES


def _slot_protein(slot, recipe_index) -> float:
    if slot.protein is not None:
        # Manual override wins for this slot only
        return slot.protein
    total = 0
    for item_name in slot.items:
        recipe = recipe_index.get(item_name)
        if recipe is not None:
            total += recipe.get_protein()
    return total


def calculate_day_protein(variant_slots: Dict[str, Any], recipes: RecipeSource) -> int:
    """Sum protein grams over the four meal types of one variant of a day.

    Each slot contributes its manual ``protein`` when set, otherwise the protein of
    every item that matches a recipe by exact name. Unmatched items add nothing.
    """
    if not isinstance(variant_slots, dict):
        return 0
    recipe_index = index_recipes(recipes)
    total = 0
    for meal_type in MEAL_TYPES:
        total += _slot_protein(normalize_meal_slot(variant_slots.get(meal_type)), recipe_index)
    return int(round(total))


def compute_week_protein(days: List[Dict[str, Any]], recipes: RecipeSource):
    """Aggregate adult protein for a sequence of ``{"date", "plan"}`` entries.

    Returns structure:
    {
      'days': { 'YYYY-MM-DD': grams, ... },
      'week_total': grams
    }
    """
    recipe_index = index_recipes(recipes)
    per_day: Dict[str, int] = {}
    for entry in days or []:
        plan = normalize_day_plan(entry.get("plan"))
        per_day[entry.get("date")] = calculate_day_protein(plan.adult, recipe_index)
    return {'days': per_day, 'week_total': sum(per_day.values())}


__all__ = ['calculate_day_protein', 'compute_week_protein']
