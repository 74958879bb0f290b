import asyncio
import unittest
from datetime import datetime, timedelta, timezone

import httpx

from simplemeal.infra.subscription import RevenueCatSubscription, StaticSubscription


def _iso(delta_days):
    return (datetime.now(timezone.utc) + timedelta(days=delta_days)).strftime("%Y-%m-%dT%H:%M:%SZ")


def _service(handler, **kwargs):
    params = dict(api_key="test-key", app_user_id="user-1", base_url="https://rc.test/v1")
    params.update(kwargs)
    return RevenueCatSubscription(transport=httpx.MockTransport(handler), **params)


class TestRevenueCatSubscription(unittest.TestCase):
    def test_active_entitlement_is_premium(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"subscriber": {
                "entitlements": {"premium": {"expires_date": _iso(10)}},
                "subscriptions": {},
            }})

        service = _service(handler)
        self.assertTrue(asyncio.run(service.refresh()))
        self.assertEqual(service.status, "premium")
        self.assertEqual(seen["url"], "https://rc.test/v1/subscribers/user-1")
        self.assertEqual(seen["auth"], "Bearer test-key")

    def test_lifetime_subscription_is_premium(self):
        def handler(request):
            return httpx.Response(200, json={"subscriber": {
                "entitlements": {},
                "subscriptions": {"lifetime": {"expires_date": None}},
            }})

        service = _service(handler)
        self.assertTrue(asyncio.run(service.refresh()))
        self.assertEqual(service.status, "lifetime")

    def test_expired_or_unreadable_is_free(self):
        def handler(request):
            return httpx.Response(200, json={"subscriber": {
                "entitlements": {"premium": {"expires_date": _iso(-1)}},
                "subscriptions": {"monthly": {"expires_date": "yesterday-ish"}},
            }})

        service = _service(handler)
        self.assertFalse(asyncio.run(service.refresh()))
        self.assertEqual(service.status, "free")

    def test_http_error_falls_back_to_free(self):
        service = _service(lambda request: httpx.Response(500))
        service.is_premium = True
        self.assertFalse(asyncio.run(service.refresh()))

    def test_unconfigured_is_free_without_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        service = _service(handler, api_key=None)
        self.assertFalse(asyncio.run(service.refresh()))


class TestStaticSubscription(unittest.TestCase):
    def test_fixed_state(self):
        service = StaticSubscription(is_premium=True)
        self.assertTrue(asyncio.run(service.refresh()))
        self.assertEqual(service.status, "premium")


if __name__ == '__main__':
    unittest.main()
