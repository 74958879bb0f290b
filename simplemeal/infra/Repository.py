"""Datastore collaborator: CRUD + query over the planner entities.

The core only talks to the ``Repository`` interface. ``InMemoryRepository``
keeps everything in dicts; ``JsonRepository`` adds persistence to a single
JSON document written atomically.
"""
import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal
from simplemeal.domain.PlanSettings import PlanSettings
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.utilities.errors import PersistenceError

logger = logging.getLogger(__name__)

# Table name for each entity type in the JSON document
TABLES = {
    Item: "items",
    Meal: "meals",
    ScheduledMeal: "scheduled_meals",
    ShoppingListItem: "shopping_list",
}


class Repository:
    """Interface expected by the planner logic."""

    def insert(self, entity):
        raise NotImplementedError

    def delete(self, entity) -> None:
        raise NotImplementedError

    def get(self, kind: type, entity_id: str):
        raise NotImplementedError

    def query(self, kind: type, predicate: Optional[Callable[[Any], bool]] = None,
              sort_key: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> List[Any]:
        raise NotImplementedError

    def settings(self) -> PlanSettings:
        raise NotImplementedError

    def update_settings(self, settings: PlanSettings) -> PlanSettings:
        raise NotImplementedError

    def save(self) -> None:
        raise NotImplementedError

    def transaction(self):
        """Context manager: commit on success, roll back on error."""
        raise NotImplementedError

    # --- helpers built on the primitives ---------------------------------
    def resolve_meal(self, meal_id: str) -> Optional[Meal]:
        '''Lookup for a scheduled meal's reference; None means the meal is gone.'''
        return self.get(Meal, meal_id)

    def meals_by_id(self) -> Dict[str, Meal]:
        return {meal.id: meal for meal in self.query(Meal)}


class InMemoryRepository(Repository):
    def __init__(self):
        self._tables: Dict[type, Dict[str, Any]] = {kind: {} for kind in TABLES}
        self._settings: Optional[PlanSettings] = None

    def _table(self, kind: type) -> Dict[str, Any]:
        try:
            return self._tables[kind]
        except KeyError:
            raise TypeError(f"Unsupported entity type: {kind.__name__}") from None

    def insert(self, entity):
        self._table(type(entity))[entity.id] = entity
        return entity

    def delete(self, entity) -> None:
        # Meal ingredients live inside the meal, so they go with it
        self._table(type(entity)).pop(entity.id, None)

    def get(self, kind: type, entity_id: str):
        return self._table(kind).get(entity_id)

    def query(self, kind, predicate=None, sort_key=None, reverse=False):
        rows = [row for row in self._table(kind).values() if predicate is None or predicate(row)]
        if sort_key is not None:
            rows.sort(key=sort_key, reverse=reverse)
        return rows

    def settings(self) -> PlanSettings:
        if self._settings is None:
            self._settings = PlanSettings()
        return self._settings

    def update_settings(self, settings: PlanSettings) -> PlanSettings:
        self._settings = settings
        return settings

    def save(self) -> None:
        pass

    # --- snapshots ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            table: [row.to_dict() for row in self._tables[kind].values()]
            for kind, table in TABLES.items()
        }
        data["settings"] = self._settings.to_dict() if self._settings else None
        return data

    def load_dict(self, data: Dict[str, Any]) -> None:
        for kind, table in TABLES.items():
            self._tables[kind] = {}
            for row in data.get(table) or []:
                entity = kind.from_dict(row)
                self._tables[kind][entity.id] = entity
        settings = data.get("settings")
        self._settings = PlanSettings.from_dict(settings) if settings else None

    @contextmanager
    def transaction(self):
        """Unit of work: saves on success, restores the previous state on any error."""
        snapshot = self.to_dict()
        try:
            yield self
            self.save()
        except Exception:
            self.load_dict(snapshot)
            raise


class JsonRepository(InMemoryRepository):
    def __init__(self, path):
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"Store not found at {self.path}; starting empty.")
            return
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read store {self.path}: {e}")
            raise PersistenceError(f"Cannot read store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Store {self.path} is not a JSON object")
        try:
            self.load_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Store {self.path} has a malformed record: {e!r}")
            raise PersistenceError(f"Store {self.path} has a malformed record: {e!r}") from e

    def save(self) -> None:
        """Atomic write: dump to a temp file in the same directory, then replace."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".store_", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(self.to_dict(), tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Saving store {self.path} failed: {e}")
            raise PersistenceError(f"Saving store failed: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)


__all__ = ['Repository', 'InMemoryRepository', 'JsonRepository', 'TABLES']
