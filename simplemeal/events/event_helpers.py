"""Event helper utilities.

Publishing helpers for planner events. Each takes an optional bus; the
module default is used when none is given.

Quick import:
    from simplemeal.events.event_helpers import (
        publish_shopping_generated, publish_orphans_purged, publish_import_applied
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    SHOPPING_GENERATED, PLAN_ORPHANS_PURGED, IMPORT_APPLIED
)

__all__ = [
    'publish_shopping_generated', 'publish_orphans_purged', 'publish_import_applied',
    'SHOPPING_GENERATED', 'PLAN_ORPHANS_PURGED', 'IMPORT_APPLIED'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_shopping_generated(count: int, start, end, bus: Optional[EventBus] = None):
    """Publish a shopping.generated event."""
    _bus(bus).publish(SHOPPING_GENERATED, {
        'count': count,
        'start': start,
        'end': end
    })


def publish_orphans_purged(ids: Iterable[str], bus: Optional[EventBus] = None):
    """Publish a plan.orphans_purged event (skipped when nothing was purged)."""
    ids_list = list(ids)
    if not ids_list:
        return
    _bus(bus).publish(PLAN_ORPHANS_PURGED, {
        'count': len(ids_list),
        'ids': ids_list
    })


def publish_import_applied(kind: str, result: Any, bus: Optional[EventBus] = None):
    """Publish an import.applied event."""
    _bus(bus).publish(IMPORT_APPLIED, {
        'kind': kind,
        'result': result
    })
