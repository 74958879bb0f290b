"""Item domain entity: reusable product definition (name, category, optional custom emoji)."""
from typing import Optional
from uuid import uuid4

from simplemeal.domain.DefaultItems import emoji_for


class Item:
    def __init__(self, name: str = "", category: str = "Pantry",
                 custom_emoji: Optional[str] = None, id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.category = category
        self.custom_emoji = custom_emoji

    @property
    def display_emoji(self) -> str:
        return emoji_for(self.name, self.category, self.custom_emoji)

    def copy(self) -> "Item":
        '''Returns an owned copy with a fresh id (used when an item becomes a meal ingredient).'''
        return Item(self.name, self.category, self.custom_emoji)

    def __str__(self) -> str:
        return f"{self.display_emoji} {self.name} ({self.category})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Item object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Item(
            name=d.get("name", ""),
            category=d.get("category") or "Pantry",
            custom_emoji=d.get("custom_emoji"),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "custom_emoji": self.custom_emoji,
        }
