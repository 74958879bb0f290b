"""ShoppingListItem: flat, checkable shopping-list entry independent of the item library."""
from typing import Optional
from uuid import uuid4

from simplemeal.domain.DefaultItems import emoji_for


class ShoppingListItem:
    def __init__(self, name: str = "", count: int = 1, category: str = "Pantry",
                 is_checked: bool = False, id: Optional[str] = None):
        if count < 1:
            raise ValueError(f"Count must be at least 1: {count}")
        self.id = id or uuid4().hex
        self.name = name
        self.count = count
        self.category = category
        self.is_checked = is_checked

    def increment(self):
        self.count += 1
        return self

    def decrement(self):
        '''Decreases the count, never below 1. Removing the entry is a separate delete.'''
        if self.count > 1:
            self.count -= 1
        return self

    def toggle_checked(self):
        self.is_checked = not self.is_checked
        return self

    @property
    def formatted_count(self) -> str:
        return f"x{self.count}" if self.count > 1 else ""

    @property
    def display_emoji(self) -> str:
        return emoji_for(self.name, self.category)

    def __str__(self) -> str:
        parts = ["[x]" if self.is_checked else "[ ]", self.name]
        if self.formatted_count:
            parts.append(self.formatted_count)
        parts.append(f"({self.category})")
        return " ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            count = max(int(d.get("count", 1)), 1)
        except (TypeError, ValueError):
            count = 1
        return ShoppingListItem(
            name=d.get("name", ""),
            count=count,
            category=d.get("category") or "Pantry",
            is_checked=bool(d.get("is_checked", False)),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "count": self.count,
            "category": self.category,
            "is_checked": self.is_checked,
        }
