"""
Input validation schemas using Pydantic for the HTTP adapter.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class ItemInput(BaseModel):
    """Schema for a library item."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field("Pantry", min_length=1, max_length=50)
    custom_emoji: Optional[str] = Field(None, max_length=8)

    @field_validator('name', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class MealInput(BaseModel):
    """Schema for meal creation; ingredients are library item ids."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=2000)
    category: str = "Other"
    ingredient_ids: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate meal name."""
        if not v.strip():
            raise ValueError('Meal name cannot be empty')
        return v.strip()


class ScheduleInput(BaseModel):
    """Schema for putting a meal on the plan."""
    meal_id: str = Field(..., min_length=1)
    date: datetime
    meal_time: Optional[datetime] = None


class SettingsInput(BaseModel):
    """Schema for the planning window."""
    selected_date: datetime
    number_of_days: int = Field(..., ge=1, le=30)


class LibraryItemsInput(BaseModel):
    """Library item ids to add to the shopping list."""
    item_ids: List[str] = Field(..., min_length=1)


class ShoppingListItemInput(BaseModel):
    """Schema for a manual shopping list entry."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field("Pantry", min_length=1, max_length=50)
    count: int = Field(1, ge=1)


class GenerateInput(BaseModel):
    """Window for shopping list generation; defaults to the plan settings."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class ImportInput(BaseModel):
    """A share link received by the app."""
    url: str = Field(..., min_length=1)
