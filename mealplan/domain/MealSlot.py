"""MealSlot domain entity: one meal assignment (items, protein override, completion, prep notes)."""
from typing import List, Optional


class MealSlot:
    def __init__(self, items: Optional[List[str]] = None, protein: Optional[float] = None,
                 completed: bool = False, prep_notes: Optional[str] = None):
        # Avoid mutable default arguments
        self.items = items[:] if items else []
        self.protein = protein
        # completed only when there is something planned
        self.completed = bool(completed) and bool(self.items)
        self.prep_notes = prep_notes

    def is_empty(self) -> bool:
        return not self.items

    def has_prep_notes(self) -> bool:
        return bool(self.prep_notes and self.prep_notes.strip())

    def label(self, separator: str = ", ") -> str:
        return separator.join(self.items)

    def copy(self, strip_completed: bool = False) -> "MealSlot":
        return MealSlot(self.items, self.protein,
                        False if strip_completed else self.completed, self.prep_notes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealSlot):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        text = self.label() or "Not planned"
        if self.protein is not None:
            text += f" ({self.protein}g protein)"
        if self.completed:
            text += " [done]"
        return text

    def __repr__(self) -> str:
        return f"MealSlot({self.to_dict()!r})"

    def to_dict(self):
        '''Converts the slot to the persisted document shape.'''
        return {
            "items": list(self.items),
            "protein": self.protein,
            "completed": self.completed,
            "prepNotes": self.prep_notes,
        }
