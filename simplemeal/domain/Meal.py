"""Meal domain entity: name, description, optional image, category and owned ingredient entries."""
import base64
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from simplemeal.domain.Item import Item


class MealCategory(Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"
    DESSERT = "Dessert"
    OTHER = "Other"

    @classmethod
    def parse(cls, value) -> "MealCategory":
        """Total decoder: anything that is not an exact category name becomes OTHER."""
        if isinstance(value, MealCategory):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_ICONS = {
    MealCategory.BREAKFAST: "🌅",
    MealCategory.LUNCH: "☀️",
    MealCategory.DINNER: "🌙",
    MealCategory.SNACK: "🥤",
    MealCategory.DESSERT: "🍰",
    MealCategory.OTHER: "🍽️",
}


class Meal:
    def __init__(self, name: str = "", description: str = "", category=MealCategory.OTHER,
                 ingredients: Optional[List[Item]] = None, image_data: Optional[bytes] = None,
                 id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.description = description
        self.category = MealCategory.parse(category)
        self.ingredients = ingredients[:] if ingredients else []
        self.image_data = image_data

    @property
    def ingredient_names(self) -> List[str]:
        return [ing.name for ing in self.ingredients]

    def __str__(self) -> str:
        return f"{self.category.icon} {self.name} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        image = d.get("image_data")
        return Meal(
            name=d.get("name", ""),
            description=d.get("description", ""),
            category=d.get("category", MealCategory.OTHER.value),
            ingredients=[Item.from_dict(ing) for ing in d.get("ingredients", [])],
            image_data=base64.b64decode(image) if image else None,
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "image_data": base64.b64encode(self.image_data).decode("ascii") if self.image_data else None,
        }
