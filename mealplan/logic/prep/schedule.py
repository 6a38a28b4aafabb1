"""Prep schedule derivation.

Anything flagged for advance preparation has to be done the day before the meal.
derive_prep_schedule(days, recipes) walks a week and buckets PrepItems under the
prep date; the first day of the week buckets under BEFORE_WEEK.
"""
from typing import Any, Dict, List, Sequence

from mealplan.domain.PrepItem import PrepItem
from mealplan.domain.Recipe import RecipeSource, index_recipes
from mealplan.logic.planning.normalize import normalize_day_plan
from mealplan.utilities.constants import BEFORE_WEEK, DEFAULT_PREP_INSTRUCTIONS, MEAL_TYPES, VARIANTS


def _prep_items_for_slot(date: str, variant: str, meal_type: str, slot, recipe_index) -> List[PrepItem]:
    items: List[PrepItem] = []
    if slot.has_prep_notes():
        label = slot.label() or meal_type.capitalize()
        items.append(PrepItem.custom_note(date, meal_type, variant, label, slot.prep_notes))
    for item_name in slot.items:
        recipe = recipe_index.get(item_name)
        if recipe is not None and recipe.requires_prep:
            instructions = recipe.prep_instructions or DEFAULT_PREP_INSTRUCTIONS
            items.append(PrepItem.recipe_prep(item_name, instructions, meal_type, variant))
    return items


def _new_bucket(days: Sequence[Dict[str, Any]], prep_index: int, day: Dict[str, Any]) -> Dict[str, Any]:
    prep_day = days[prep_index] if prep_index >= 0 else {}
    return {
        'day_name': prep_day.get('short_name', 'Before') if prep_index >= 0 else 'Before',
        'date_num': prep_day.get('date_num', '') if prep_index >= 0 else '',
        'for_day': day.get('short_name', ''),
        'for_date_num': day.get('date_num', ''),
        'for_date': day.get('date'),
        'items': [],
    }


def derive_prep_schedule(days: Sequence[Dict[str, Any]], recipes: RecipeSource) -> Dict[str, Dict[str, Any]]:
    """Map prep date -> bucket of PrepItems needed for the following day's meals.

    Args:
        days: ordered ``{"date", "plan"}`` entries (normally 7 consecutive dates);
              optional ``short_name``/``date_num`` are copied into bucket metadata.
        recipes: recipe records or a name -> Recipe index.
    Returns:
        { prep_date: { day_name, date_num, for_day, for_date_num, for_date, items: [PrepItem] } }
    Rules:
      - A slot with prep notes yields one custom item keyed per date/meal/variant.
      - Every item whose recipe requires prep yields a recipe item keyed by name.
      - Within a bucket, items sharing a unique_key are kept once (first wins).
    """
    recipe_index = index_recipes(recipes)
    schedule: Dict[str, Dict[str, Any]] = {}
    seen: Dict[str, set] = {}

    for day_index, day in enumerate(days or []):
        plan = normalize_day_plan(day.get('plan'))
        prep_index = day_index - 1
        prep_date = days[prep_index].get('date') if prep_index >= 0 else BEFORE_WEEK
        for variant in VARIANTS:
            for meal_type in MEAL_TYPES:
                slot = plan.variant(variant).get(meal_type)
                if slot is None:
                    continue
                for item in _prep_items_for_slot(day.get('date'), variant, meal_type, slot, recipe_index):
                    if prep_date not in schedule:
                        schedule[prep_date] = _new_bucket(days, prep_index, day)
                        seen[prep_date] = set()
                    if item.unique_key in seen[prep_date]:
                        continue
                    seen[prep_date].add(item.unique_key)
                    schedule[prep_date]['items'].append(item)
    return schedule


def meals_needing_prep(day_plan: Any, recipes: RecipeSource) -> List[PrepItem]:
    """Recipe prep items for one date's meals, once per recipe across variants."""
    recipe_index = index_recipes(recipes)
    plan = normalize_day_plan(day_plan)
    needs_prep: List[PrepItem] = []
    seen_recipes = set()
    for variant in VARIANTS:
        for meal_type in MEAL_TYPES:
            for item_name in plan.slot(variant, meal_type).items:
                recipe = recipe_index.get(item_name)
                if recipe is None or not recipe.requires_prep or item_name in seen_recipes:
                    continue
                seen_recipes.add(item_name)
                needs_prep.append(PrepItem.recipe_prep(
                    item_name, recipe.prep_instructions or '', meal_type, variant))
    return needs_prep


def is_prep_completed(completions: Dict[str, bool], prep_date: str, item: PrepItem) -> bool:
    return bool(completions.get(item.completion_key(prep_date)))


__all__ = ['derive_prep_schedule', 'meals_needing_prep', 'is_prep_completed']
