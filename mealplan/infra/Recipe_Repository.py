import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from mealplan.domain.Recipe import Recipe
from mealplan.utilities.config import RECIPES_FILE
from mealplan.utilities.validators import RecipeInput

logger = logging.getLogger(__name__)


def recipes_from_records(records: Iterable[dict]) -> List[Recipe]:
    """Validate raw recipe records; invalid ones are skipped with a warning."""
    recipes: List[Recipe] = []
    for entry in records or []:
        try:
            data = RecipeInput.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid recipe record {entry!r}: {e.error_count()} error(s)")
            continue
        recipes.append(Recipe(
            name=data.name,
            protein=data.protein,
            requires_prep=data.requires_prep,
            prep_instructions=data.prep_instructions,
            icon=data.icon,
            tags=data.tags,
        ))
    return recipes


class StaticRecipeRepository:
    """Serves the same recipe list to every member."""

    def __init__(self, recipes: Iterable[Union[Recipe, dict]] = ()):
        self._recipes = [r if isinstance(r, Recipe) else Recipe.from_dict(r) for r in recipes]

    def get_recipes_for_meal_plan(self, member_id: str) -> List[Recipe]:
        return list(self._recipes)


class JsonRecipeRepository:
    """Reads recipes from JSON: either a shared list or a ``{member_id: [recipes]}`` mapping."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or RECIPES_FILE)

    def get_recipes_for_meal_plan(self, member_id: str) -> List[Recipe]:
        """Read recipes from JSON file with proper error handling."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                recipes_data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Recipes file not found: {self.path}. Returning empty list.")
            return []
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in recipes file: {e}")
            return []
        except OSError as e:
            logger.error(f"Error reading recipes: {e}")
            return []
        if isinstance(recipes_data, dict):
            recipes_data = recipes_data.get(member_id) or []
        if not isinstance(recipes_data, list):
            return []
        return recipes_from_records(recipes_data)
