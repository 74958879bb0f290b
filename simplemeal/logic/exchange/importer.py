"""Applies a confirmed ImportCandidate to the datastore.

Everything for one candidate is written in a single repository transaction:
either the whole import lands or nothing does.
"""
import logging
from typing import List, NamedTuple

from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal, MealCategory
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.events.event_helpers import publish_import_applied
from simplemeal.logic.exchange.codec import ImportCandidate
from simplemeal.logic.exchange.payloads import MealPayload, MealPlanPayload, ShoppingListPayload
from simplemeal.utilities.config import DEFAULT_INGREDIENT_CATEGORY
from simplemeal.utilities.dates import from_epoch

logger = logging.getLogger(__name__)


class ImportResult(NamedTuple):
    items: int = 0
    meals: int = 0
    scheduled_meals: int = 0
    shopping_items: int = 0


def materialize_meal(name: str, description: str, category: str, ingredient_names: List[str],
                     ingredient_category: str = DEFAULT_INGREDIENT_CATEGORY):
    """Build the library items and the meal (owning copies of them) for one imported meal.

    Unknown category strings fall back to Other; this never fails.
    """
    items = [Item(name=ingredient, category=ingredient_category) for ingredient in ingredient_names]
    meal = Meal(
        name=name,
        description=description,
        category=MealCategory.parse(category),
        ingredients=[item.copy() for item in items],
    )
    return items, meal


def _import_meal_plan(payload: MealPlanPayload, repo) -> ImportResult:
    items = meals = scheduled = 0
    for entry in payload.meals:
        ingredients, meal = materialize_meal(entry.name, entry.description, entry.category, entry.ingredient_names)
        for ingredient in ingredients:
            repo.insert(ingredient)
        repo.insert(meal)
        repo.insert(ScheduledMeal(
            date=from_epoch(entry.date),
            meal_id=meal.id,
            meal_time=from_epoch(entry.meal_time),
        ))
        items += len(ingredients)
        meals += 1
        scheduled += 1
    return ImportResult(items=items, meals=meals, scheduled_meals=scheduled)


def _import_shopping_list(payload: ShoppingListPayload, repo) -> ImportResult:
    for entry in payload.items:
        repo.insert(ShoppingListItem(
            name=entry.name,
            count=max(entry.count, 1),
            category=entry.category,
            is_checked=False,
        ))
    return ImportResult(shopping_items=len(payload.items))


def _import_meal(payload: MealPayload, repo) -> ImportResult:
    ingredients, meal = materialize_meal(payload.name, payload.description, payload.category, payload.ingredient_names)
    for ingredient in ingredients:
        repo.insert(ingredient)
    repo.insert(meal)
    return ImportResult(items=len(ingredients), meals=1)


_APPLIERS = {
    MealPlanPayload: _import_meal_plan,
    ShoppingListPayload: _import_shopping_list,
    MealPayload: _import_meal,
}


def apply_import(candidate: ImportCandidate, repo, *, bus=None) -> ImportResult:
    """Write a confirmed import. PersistenceError propagates after rollback; no retry."""
    apply = _APPLIERS[type(candidate.payload)]
    with repo.transaction():
        result = apply(candidate.payload, repo)
    logger.info(f"Imported {candidate.describe()}: {result._asdict()}")
    publish_import_applied(candidate.kind, result, bus=bus)
    return result


__all__ = ['ImportResult', 'apply_import', 'materialize_meal']
