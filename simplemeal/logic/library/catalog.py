"""Item library and meal composition.

Meals own copies of the library items they are built from, so deleting or
renaming a library item never changes an existing meal. Deleting a meal leaves
its scheduled meals behind as orphans; the shopping builder purges them.
"""
import logging
from typing import Iterable, List, Optional

from simplemeal.domain.DefaultItems import DEFAULT_ITEMS
from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal, MealCategory

logger = logging.getLogger(__name__)


def seed_default_items(repo) -> int:
    """Fill an empty library with the default catalog; returns how many were inserted."""
    if repo.query(Item):
        return 0
    with repo.transaction():
        for name, category, _emoji in DEFAULT_ITEMS:
            repo.insert(Item(name=name, category=category))
    logger.info(f"Seeded item library with {len(DEFAULT_ITEMS)} default items")
    return len(DEFAULT_ITEMS)


def library_items(repo, category: Optional[str] = None) -> List[Item]:
    """Library items sorted by (category, name), optionally for one category."""
    predicate = (lambda item: item.category == category) if category else None
    return repo.query(Item, predicate=predicate, sort_key=lambda item: (item.category, item.name.lower()))


def create_item(repo, name: str, category: str, custom_emoji: Optional[str] = None) -> Item:
    with repo.transaction():
        item = repo.insert(Item(name=name, category=category, custom_emoji=custom_emoji))
    return item


def create_meal(repo, name: str, description: str = "", category=MealCategory.OTHER,
                ingredient_ids: Iterable[str] = ()) -> Meal:
    """Create a meal from library item ids. Unknown ids raise KeyError; nothing is written then."""
    ingredients = []
    for item_id in ingredient_ids:
        item = repo.get(Item, item_id)
        if item is None:
            raise KeyError(item_id)
        ingredients.append(item.copy())
    with repo.transaction():
        meal = repo.insert(Meal(
            name=name,
            description=description,
            category=MealCategory.parse(category),
            ingredients=ingredients,
        ))
    logger.info(f"Created meal {meal.name!r} with {len(ingredients)} ingredient(s)")
    return meal


def delete_entity(repo, kind: type, entity_id: str) -> bool:
    entity = repo.get(kind, entity_id)
    if entity is None:
        return False
    with repo.transaction():
        repo.delete(entity)
    return True


__all__ = ['seed_default_items', 'library_items', 'create_item', 'create_meal', 'delete_entity']
