import unittest
from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from simplemeal.api.api_run import app
from simplemeal.api.dependencies import get_event_bus, get_repository, get_subscription
from simplemeal.domain.Item import Item
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.events.Event_Bus import EventBus
from simplemeal.infra.Repository import InMemoryRepository
from simplemeal.infra.subscription import StaticSubscription


class PlannerApiTestCase(unittest.TestCase):
    premium = False

    def setUp(self):
        self.repo = InMemoryRepository()
        self.subscription = StaticSubscription(is_premium=self.premium)
        app.dependency_overrides[get_repository] = lambda: self.repo
        app.dependency_overrides[get_subscription] = lambda: self.subscription
        app.dependency_overrides[get_event_bus] = lambda: EventBus()
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _meal(self, name="Pancakes", *ingredients):
        ids = [self.repo.insert(Item(n, c)).id for n, c in ingredients]
        resp = self.client.post('/api/meals', json={"name": name, "category": "Breakfast", "ingredient_ids": ids})
        self.assertEqual(resp.status_code, 201)
        return resp.json()


class TestLibraryApi(PlannerApiTestCase):
    def test_items_crud(self):
        resp = self.client.post('/api/items', json={"name": "  Apples ", "category": "Produce"})
        self.assertEqual(resp.status_code, 201)
        item = resp.json()
        self.assertEqual(item["name"], "Apples")
        self.assertEqual(item["display_emoji"], "🍎")

        self.assertEqual([i["name"] for i in self.client.get('/api/items', params={"category": "Produce"}).json()], ["Apples"])
        self.assertEqual(self.client.delete(f"/api/items/{item['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/items/{item['id']}").status_code, 404)

    def test_meal_with_unknown_item(self):
        resp = self.client.post('/api/meals', json={"name": "Ghost", "ingredient_ids": ["nope"]})
        self.assertEqual(resp.status_code, 400)

    def test_meal_validation(self):
        self.assertEqual(self.client.post('/api/meals', json={"name": "   "}).status_code, 422)

    def test_meal_view(self):
        meal = self._meal("Toast", ("Bread", "Pantry"))
        self.assertEqual(meal["icon"], "🌅")
        self.assertEqual([i["name"] for i in meal["ingredients"]], ["Bread"])
        self.assertFalse(meal["has_image"])
        self.assertEqual(self.client.get(f"/api/meals/{meal['id']}").json()["name"], "Toast")


class TestPlanApiFreeUser(PlannerApiTestCase):
    def test_one_meal_per_day(self):
        meal = self._meal()
        today = datetime.now().replace(microsecond=0)
        first = self.client.post('/api/plan', json={"meal_id": meal["id"], "date": today.isoformat()})
        self.assertEqual(first.status_code, 201)

        second = self.client.post('/api/plan', json={"meal_id": meal["id"], "date": today.isoformat()})
        self.assertEqual(second.status_code, 403)
        self.assertEqual(second.json(), {"paywall": True, "reason": "meal_limit_reached"})

    def test_date_outside_free_window(self):
        meal = self._meal()
        later = datetime.now() + timedelta(days=8)
        resp = self.client.post('/api/plan', json={"meal_id": meal["id"], "date": later.isoformat()})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["reason"], "date_out_of_range")

    def test_unknown_meal(self):
        resp = self.client.post('/api/plan', json={"meal_id": "nope", "date": datetime.now().isoformat()})
        self.assertEqual(resp.status_code, 404)

    def test_settings_limited_to_seven_days(self):
        resp = self.client.put('/api/settings', json={"selected_date": "2026-10-19T00:00:00", "number_of_days": 10})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["reason"], "too_many_days")

        resp = self.client.put('/api/settings', json={"selected_date": "2026-10-19T00:00:00", "number_of_days": 3})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["date_range"], ["2026-10-19", "2026-10-20", "2026-10-21"])

    def test_entitlements(self):
        data = self.client.get('/api/entitlements').json()
        self.assertEqual(data, {"is_premium": False, "max_meals_per_day": 1, "max_planning_days": 7, "status": "free"})


class TestPlanApiPremiumUser(PlannerApiTestCase):
    premium = True

    def test_plan_view_orders_meals_and_drops_orphans(self):
        meal = self._meal()
        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        self.client.put('/api/settings', json={"selected_date": today.isoformat(), "number_of_days": 2})
        for hour in (19, 8):
            resp = self.client.post('/api/plan', json={
                "meal_id": meal["id"], "date": today.isoformat(),
                "meal_time": today.replace(hour=hour).isoformat(),
            })
            self.assertEqual(resp.status_code, 201)
        self.repo.insert(ScheduledMeal(today, "deleted-meal"))

        days = self.client.get('/api/plan').json()["days"]
        self.assertEqual(len(days), 2)
        times = [entry["meal_time"] for entry in days[0]["meals"]]
        self.assertEqual(times, [today.replace(hour=8).isoformat(), today.replace(hour=19).isoformat()])
        self.assertEqual(days[1]["meals"], [])
        self.assertEqual(len(self.repo.query(ScheduledMeal)), 2)

    def test_deleting_meal_orphans_schedule(self):
        meal = self._meal()
        today = datetime.now()
        scheduled = self.client.post('/api/plan', json={"meal_id": meal["id"], "date": today.isoformat()}).json()
        self.assertEqual(self.client.delete(f"/api/meals/{meal['id']}").status_code, 200)
        self.client.get('/api/plan')
        self.assertIsNone(self.repo.get(ScheduledMeal, scheduled["id"]))


class TestShoppingListApi(PlannerApiTestCase):
    premium = True

    def test_generate_from_plan_window(self):
        meal = self._meal("Omelette", ("Milk", "Dairy & Eggs"), ("Eggs", "Dairy & Eggs"))
        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        self.client.put('/api/settings', json={"selected_date": today.isoformat(), "number_of_days": 2})
        for offset in (0, 1, 5):
            self.client.post('/api/plan', json={"meal_id": meal["id"], "date": (today + timedelta(days=offset)).isoformat()})

        data = self.client.post('/api/shopping-list/generate').json()
        self.assertEqual({i["name"]: i["count"] for i in data["items"]}, {"Milk": 2, "Eggs": 2})
        self.assertEqual(data["orphans_removed"], 0)

    def test_generate_with_explicit_window(self):
        meal = self._meal("Omelette", ("Eggs", "Dairy & Eggs"))
        day = datetime(2026, 11, 2)
        self.repo.insert(ScheduledMeal(day, meal["id"]))
        data = self.client.post('/api/shopping-list/generate', json={
            "start": day.isoformat(), "end": day.isoformat(),
        }).json()
        self.assertEqual([(i["name"], i["count"]) for i in data["items"]], [("Eggs", 1)])

    def test_entry_mutations(self):
        entry = self.client.post('/api/shopping-list/entries', json={"name": "Milk", "category": "Dairy & Eggs"}).json()
        self.assertEqual(self.client.post(f"/api/shopping-list/{entry['id']}/increment").json()["count"], 2)
        self.assertEqual(self.client.post(f"/api/shopping-list/{entry['id']}/decrement").json()["count"], 1)
        self.assertEqual(self.client.post(f"/api/shopping-list/{entry['id']}/decrement").json()["count"], 1)
        self.assertTrue(self.client.post(f"/api/shopping-list/{entry['id']}/toggle").json()["is_checked"])

        listing = self.client.get('/api/shopping-list').json()
        self.assertEqual((listing["checked"], listing["total"]), (1, 1))
        self.assertEqual(self.client.delete(f"/api/shopping-list/{entry['id']}").status_code, 200)
        self.assertEqual(self.client.post(f"/api/shopping-list/{entry['id']}/toggle").status_code, 404)

    def test_add_library_items_and_clear(self):
        bread = self.repo.insert(Item("Bread", "Pantry"))
        self.client.post('/api/shopping-list/items', json={"item_ids": [bread.id]})
        data = self.client.post('/api/shopping-list/items', json={"item_ids": [bread.id]}).json()
        self.assertEqual([(i["name"], i["count"]) for i in data["items"]], [("Bread", 2)])
        self.assertEqual(self.client.delete('/api/shopping-list').json(), {"removed": 1})
        self.assertEqual(self.repo.query(ShoppingListItem), [])


if __name__ == '__main__':
    unittest.main()
