"""Wire payloads for share links.

Key names are the contract with links already shared by installed apps
(``ingredients``, ``mealTime``, ``dateRange``). The alternative spellings
``ingredientNames`` / ``dateRangeEpochs`` are accepted on input only.
"""
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class MealPlanEntry(_Payload):
    name: str
    description: str = ""
    category: str = "Other"
    ingredient_names: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "ingredientNames", "ingredient_names"),
        serialization_alias="ingredients",
    )
    date: float
    meal_time: float = Field(
        validation_alias=AliasChoices("mealTime", "meal_time"),
        serialization_alias="mealTime",
    )


class MealPlanPayload(_Payload):
    meals: List[MealPlanEntry]
    date_range: List[float] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dateRange", "dateRangeEpochs", "date_range"),
        serialization_alias="dateRange",
    )

    @field_validator("date_range")
    @classmethod
    def sorted_unique(cls, v):
        """Keep the range ascending and free of duplicates."""
        return sorted(set(v))


class ShoppingListEntry(_Payload):
    name: str
    category: str = "Pantry"
    count: int = 1


class ShoppingListPayload(_Payload):
    items: List[ShoppingListEntry]


class MealPayload(_Payload):
    name: str
    description: str = ""
    category: str = "Other"
    ingredient_names: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "ingredientNames", "ingredient_names"),
        serialization_alias="ingredients",
    )


__all__ = [
    'MealPlanEntry', 'MealPlanPayload', 'ShoppingListEntry', 'ShoppingListPayload', 'MealPayload'
]
