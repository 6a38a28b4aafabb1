"""PrepItem: one thing to prepare the day before a planned meal (derived, never persisted)."""


class PrepItem:
    def __init__(self, recipe_name: str, prep_instructions: str, for_meal_type: str,
                 variant: str, is_custom_note: bool, unique_key: str):
        self.recipe_name = recipe_name
        self.prep_instructions = prep_instructions
        self.for_meal_type = for_meal_type
        self.variant = variant
        self.is_custom_note = is_custom_note
        self.unique_key = unique_key

    @classmethod
    def custom_note(cls, date: str, meal_type: str, variant: str, label: str, notes: str) -> "PrepItem":
        return cls(label, notes, meal_type, variant, True, f"custom:{date}:{meal_type}:{variant}")

    @classmethod
    def recipe_prep(cls, item_name: str, instructions: str, meal_type: str, variant: str) -> "PrepItem":
        return cls(item_name, instructions, meal_type, variant, False, f"recipe:{item_name}")

    def completion_key(self, prep_date: str) -> str:
        return f"{prep_date}:{self.recipe_name}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrepItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"PrepItem({self.unique_key!r}, {self.recipe_name!r})"

    def to_dict(self):
        return {
            "recipeName": self.recipe_name,
            "prepInstructions": self.prep_instructions,
            "forMealType": self.for_meal_type,
            "variant": self.variant,
            "isCustomNote": self.is_custom_note,
            "uniqueKey": self.unique_key,
        }
