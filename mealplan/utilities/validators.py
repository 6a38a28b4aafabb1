"""
Input validation schemas using Pydantic for plan mutations and recipe records.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mealplan.utilities.constants import ISO_DATE_FORMAT


class SlotKeyInput(BaseModel):
    """Schema addressing one slot of the weekly plan."""
    date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    variant: str = Field(..., pattern=r'^(adult|kids)$')
    meal_type: str = Field(..., pattern=r'^(breakfast|lunch|dinner|snacks)$')

    @field_validator('date')
    @classmethod
    def validate_calendar_date(cls, v):
        """Reject well-formed strings that are not real dates (e.g. 2025-02-30)."""
        datetime.strptime(v, ISO_DATE_FORMAT)
        return v


class SlotInput(BaseModel):
    """Schema for a slot written through the editor (items + optional overrides)."""
    items: List[str] = Field(default_factory=list)
    protein: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    prep_notes: Optional[str] = Field(None, max_length=500)

    @field_validator('items')
    @classmethod
    def strip_items(cls, v):
        """Remove blank entries and surrounding whitespace."""
        return [item.strip() for item in v if item and item.strip()]

    @field_validator('prep_notes')
    @classmethod
    def blank_notes_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v


class RecipeInput(BaseModel):
    """Schema for recipe records coming from the recipe collaborator."""
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    name: str = Field(..., min_length=1, max_length=200)
    protein: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    requires_prep: bool = Field(False, alias='requiresPrep')
    prep_instructions: Optional[str] = Field(None, alias='prepInstructions')
    icon: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]

    @field_validator('requires_prep', mode='before')
    @classmethod
    def none_is_false(cls, v):
        return bool(v)
