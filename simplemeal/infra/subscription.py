"""Subscription collaborators feeding the entitlement policy.

Only ``is_premium`` is consumed by the core; ``refresh()`` is the one async
call and only updates that snapshot.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from simplemeal.utilities.config import REVENUECAT_API_URL, REVENUECAT_API_KEY, REVENUECAT_APP_USER_ID

logger = logging.getLogger(__name__)

FREE = "free"


class SubscriptionService:
    def __init__(self):
        self.is_premium = False
        self.status = FREE

    async def refresh(self) -> bool:
        return self.is_premium


class StaticSubscription(SubscriptionService):
    """Fixed state; for local use and tests."""

    def __init__(self, is_premium: bool = False):
        super().__init__()
        self.is_premium = is_premium
        self.status = "premium" if is_premium else FREE


def _parse_expiry(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _is_active(record: dict, now: datetime) -> bool:
    try:
        expires = _parse_expiry(record.get("expires_date"))
    except (TypeError, ValueError):
        logger.warning(f"Unreadable expiry date: {record.get('expires_date')!r}")
        return False
    # lifetime purchases carry no expiry
    return expires is None or expires > now


class RevenueCatSubscription(SubscriptionService):
    """Reads the subscriber record from the RevenueCat REST API.

    Premium when any entitlement or any subscription is active. Any failure
    falls back to free.
    """

    def __init__(self, api_key: Optional[str] = REVENUECAT_API_KEY,
                 app_user_id: Optional[str] = REVENUECAT_APP_USER_ID,
                 base_url: str = REVENUECAT_API_URL,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__()
        self.api_key = api_key
        self.app_user_id = app_user_id
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def _fetch_subscriber(self) -> dict:
        url = f"{self.base_url}/subscribers/{self.app_user_id}"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        async with httpx.AsyncClient(transport=self._transport, timeout=10.0) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json().get("subscriber") or {}

    async def refresh(self) -> bool:
        if not self.api_key or not self.app_user_id:
            logger.info("RevenueCat not configured; treating user as free")
            self.is_premium, self.status = False, FREE
            return self.is_premium
        try:
            subscriber = await self._fetch_subscriber()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error checking subscription: {e}")
            self.is_premium, self.status = False, FREE
            return self.is_premium

        now = datetime.now(timezone.utc)
        entitlements = subscriber.get("entitlements") or {}
        subscriptions = subscriber.get("subscriptions") or {}
        active_entitlements = [k for k, v in entitlements.items() if _is_active(v, now)]
        active_subscriptions = [k for k, v in subscriptions.items() if _is_active(v, now)]

        self.is_premium = bool(active_entitlements or active_subscriptions)
        if self.is_premium:
            self.status = active_subscriptions[0] if active_subscriptions else active_entitlements[0]
        else:
            self.status = FREE
        logger.info(f"Premium status: {self.is_premium} ({self.status})")
        return self.is_premium


__all__ = ['SubscriptionService', 'StaticSubscription', 'RevenueCatSubscription']
