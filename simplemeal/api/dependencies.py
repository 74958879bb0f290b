"""Request-scoped collaborators. Tests swap them through app.dependency_overrides."""
from datetime import datetime
from typing import Optional

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from simplemeal.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from simplemeal.infra.Repository import Repository
from simplemeal.infra.subscription import SubscriptionService
from simplemeal.logic.entitlement.policy import EntitlementPolicy


def get_repository(request: Request) -> Repository:
    return request.app.state.repository


def get_subscription(request: Request) -> SubscriptionService:
    return request.app.state.subscription


def get_event_bus() -> EventBus:
    return GLOBAL_EVENT_BUS


def get_policy(subscription: SubscriptionService = Depends(get_subscription)) -> EntitlementPolicy:
    return EntitlementPolicy.from_subscription(subscription)


def paywall(reason: str) -> JSONResponse:
    """403 telling the client which upgrade prompt to show."""
    return JSONResponse(status_code=403, content={"paywall": True, "reason": reason})


def local_time(value: Optional[datetime]) -> Optional[datetime]:
    """Request datetimes may carry an offset; the store keeps naive local times."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
