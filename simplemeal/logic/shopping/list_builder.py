"""Shopping list builder.

Aggregates the ingredients of scheduled meals inside a date window into
shopping-list entries, and detects scheduled meals whose meal was deleted.

aggregate_ingredients() is pure; the repository-level functions below apply
its results (orphan purge + list replacement) in one transaction.
"""
import logging
from collections import OrderedDict
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional

from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.events.event_helpers import publish_orphans_purged, publish_shopping_generated
from simplemeal.utilities.dates import DateLike, start_of_day

logger = logging.getLogger(__name__)

MealResolver = Callable[[str], Optional[Meal]]


class AggregationResult(NamedTuple):
    items: List[ShoppingListItem]
    orphans: List[str]  # ids of scheduled meals whose meal no longer exists


def sort_scheduled(scheduled_meals: Iterable[ScheduledMeal]) -> List[ScheduledMeal]:
    """Canonical iteration order (date, then meal_time) for the first-wins category rule."""
    return sorted(scheduled_meals, key=lambda s: (start_of_day(s.date), s.meal_time))


def in_window(scheduled: ScheduledMeal, start: DateLike, end: DateLike) -> bool:
    day = start_of_day(scheduled.date)
    return start_of_day(start) <= day <= start_of_day(end)


def aggregate_ingredients(scheduled_meals: Iterable[ScheduledMeal], resolve_meal: MealResolver,
                          start: DateLike, end: DateLike) -> AggregationResult:
    """Group the ingredients of scheduled meals in [start, end] by exact name.

    Args:
        scheduled_meals: iterated in the given order; the first occurrence of a
            name decides its category.
        resolve_meal: meal lookup by id; None marks the scheduled meal as orphaned.
        start, end: inclusive window, compared by calendar day.

    Returns:
        AggregationResult with one unchecked ShoppingListItem per distinct name
        and the ids of orphaned scheduled meals met inside the window.
    """
    grouped: "OrderedDict[str, Dict]" = OrderedDict()
    orphans: List[str] = []

    for scheduled in scheduled_meals:
        if not in_window(scheduled, start, end):
            continue
        meal = resolve_meal(scheduled.meal_id)
        if meal is None:
            orphans.append(scheduled.id)
            continue
        for ingredient in meal.ingredients:
            entry = grouped.get(ingredient.name)
            if entry is None:
                grouped[ingredient.name] = {"count": 1, "category": ingredient.category}
            else:
                entry["count"] += 1

    items = [
        ShoppingListItem(name=name, count=entry["count"], category=entry["category"], is_checked=False)
        for name, entry in grouped.items()
    ]
    return AggregationResult(items, orphans)


def _purge(repo, ids: Iterable[str]) -> List[str]:
    removed = []
    for scheduled_id in ids:
        scheduled = repo.get(ScheduledMeal, scheduled_id)
        if scheduled is not None:
            repo.delete(scheduled)
            removed.append(scheduled_id)
    if removed:
        logger.warning(f"Removed {len(removed)} orphaned scheduled meal(s)")
    return removed


def generate_shopping_list(repo, start: DateLike, end: DateLike, *, bus=None) -> AggregationResult:
    """Replace the shopping list with the aggregation of the plan in [start, end].

    Orphans found by the aggregation are deleted in the same transaction, so a
    second call never sees them again.
    """
    with repo.transaction():
        scheduled = sort_scheduled(repo.query(ScheduledMeal))
        result = aggregate_ingredients(scheduled, repo.resolve_meal, start, end)
        _purge(repo, result.orphans)
        for existing in repo.query(ShoppingListItem):
            repo.delete(existing)
        for item in result.items:
            repo.insert(item)
    logger.info(f"Generated shopping list with {len(result.items)} entries "
                f"for {start_of_day(start):%Y-%m-%d}..{start_of_day(end):%Y-%m-%d}")
    publish_orphans_purged(result.orphans, bus=bus)
    publish_shopping_generated(len(result.items), start, end, bus=bus)
    return result


def purge_orphans(repo, *, bus=None) -> int:
    """Full scan for scheduled meals pointing at deleted meals (run at start-up)."""
    orphan_ids = [s.id for s in repo.query(ScheduledMeal) if repo.resolve_meal(s.meal_id) is None]
    if not orphan_ids:
        return 0
    with repo.transaction():
        removed = _purge(repo, orphan_ids)
    publish_orphans_purged(removed, bus=bus)
    return len(removed)


def scheduled_meals_between(repo, start: DateLike, end: DateLike, *, bus=None) -> List[ScheduledMeal]:
    """Scheduled meals in [start, end] in (date, meal_time) order; orphans are purged, not returned."""
    rows = sort_scheduled(repo.query(ScheduledMeal, predicate=lambda s: in_window(s, start, end)))
    orphan_ids = [s.id for s in rows if repo.resolve_meal(s.meal_id) is None]
    if orphan_ids:
        with repo.transaction():
            _purge(repo, orphan_ids)
        publish_orphans_purged(orphan_ids, bus=bus)
    return [s for s in rows if s.id not in orphan_ids]


def scheduled_meals_for(repo, day: DateLike, *, bus=None) -> List[ScheduledMeal]:
    """Scheduled meals of one day ordered by meal_time."""
    return scheduled_meals_between(repo, day, day, bus=bus)


def add_library_items(repo, item_ids: Iterable[str]) -> List[ShoppingListItem]:
    """Add library items to the list: same name bumps the count, otherwise a new entry."""
    touched: List[ShoppingListItem] = []
    with repo.transaction():
        for item_id in item_ids:
            item = repo.get(Item, item_id)
            if item is None:
                logger.warning(f"Library item not found: {item_id}")
                continue
            existing = repo.query(ShoppingListItem, predicate=lambda row: row.name == item.name)
            if existing:
                touched.append(existing[0].increment())
            else:
                touched.append(repo.insert(ShoppingListItem(name=item.name, count=1, category=item.category)))
    return touched


def clear_shopping_list(repo) -> int:
    rows = repo.query(ShoppingListItem)
    with repo.transaction():
        for row in rows:
            repo.delete(row)
    return len(rows)


__all__ = [
    'AggregationResult', 'aggregate_ingredients', 'sort_scheduled', 'in_window',
    'generate_shopping_list', 'purge_orphans', 'scheduled_meals_for', 'scheduled_meals_between',
    'add_library_items', 'clear_shopping_list'
]
