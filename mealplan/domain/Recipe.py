"""Recipe domain entity as seen by the meal planner: name, protein, prep requirement, icon, tags."""
import math
from typing import Dict, Iterable, List, Optional, Union


class Recipe:
    def __init__(self, name: str = "", protein: Optional[float] = None, requires_prep: bool = False,
                 prep_instructions: Optional[str] = None, icon: Optional[str] = None,
                 tags: Optional[List[str]] = None):
        self.name = name
        self.protein = protein
        self.requires_prep = bool(requires_prep)
        self.prep_instructions = prep_instructions
        self.icon = icon
        self.tags = tags[:] if tags else []

    def __str__(self) -> str:
        parts = [self.name]
        if self.protein:
            parts.append(f"Protein: {self.protein}g")
        if self.requires_prep:
            parts.append(f"Prep: {self.prep_instructions or 'required'}")
        if self.tags:
            parts.append("Tags: " + ", ".join(self.tags))
        return " - ".join(parts)

    __repr__ = __str__

    def get_protein(self) -> float:
        if not self.protein or not math.isfinite(self.protein):
            return 0
        return self.protein

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a record; accepts camelCase collaborator keys. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        protein = d.get("protein")
        if isinstance(protein, bool) or not isinstance(protein, (int, float)) \
                or not math.isfinite(protein) or protein < 0:
            protein = None
        tags = d.get("tags")
        return Recipe(
            name=d.get("name") if isinstance(d.get("name"), str) else "",
            protein=protein,
            requires_prep=bool(d.get("requires_prep", d.get("requiresPrep", False))),
            prep_instructions=d.get("prep_instructions", d.get("prepInstructions")) or None,
            icon=d.get("icon") or None,
            tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
        )

    def to_dict(self):
        return {
            "name": self.name,
            "protein": self.protein,
            "requiresPrep": self.requires_prep,
            "prepInstructions": self.prep_instructions,
            "icon": self.icon,
            "tags": self.tags,
        }


RecipeSource = Union[Dict[str, Recipe], Iterable[Union[Recipe, dict]], None]


def index_recipes(recipes: RecipeSource) -> Dict[str, Recipe]:
    """Build an exact, case-sensitive name -> Recipe lookup. First record for a name wins."""
    if recipes is None:
        return {}
    if isinstance(recipes, dict):
        return {name: r if isinstance(r, Recipe) else Recipe.from_dict(r) for name, r in recipes.items()}
    index: Dict[str, Recipe] = {}
    for entry in recipes:
        recipe = entry if isinstance(entry, Recipe) else Recipe.from_dict(entry)
        if recipe.name and recipe.name not in index:
            index[recipe.name] = recipe
    return index
