import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient

from simplemeal.api.api_run import app
from simplemeal.api.dependencies import get_event_bus, get_repository, get_subscription
from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal, MealCategory
from simplemeal.domain.PlanSettings import PlanSettings
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.events.Event_Bus import EventBus
from simplemeal.infra.Repository import InMemoryRepository
from simplemeal.infra.subscription import StaticSubscription
from simplemeal.utilities.errors import PersistenceError


class FailingRepository(InMemoryRepository):
    def save(self):
        raise PersistenceError("read-only store")


class ExchangeApiTestCase(unittest.TestCase):
    def setUp(self):
        self.repo = InMemoryRepository()
        app.dependency_overrides[get_repository] = lambda: self.repo
        app.dependency_overrides[get_subscription] = lambda: StaticSubscription()
        app.dependency_overrides[get_event_bus] = lambda: EventBus()
        self.client = TestClient(app)

        self.day = datetime(2026, 10, 19)
        self.repo.update_settings(PlanSettings(self.day, 2))
        self.meal = self.repo.insert(Meal(name="Chili", description="Spicy", category=MealCategory.DINNER,
                                          ingredients=[Item("Beans", "Canned Goods")]))
        self.repo.insert(ScheduledMeal(self.day, self.meal.id))
        self.repo.insert(ShoppingListItem("Milk", 2, "Dairy & Eggs", is_checked=True))

    def tearDown(self):
        app.dependency_overrides.clear()


class TestShareAndImport(ExchangeApiTestCase):
    def test_share_meal_plan_then_import_elsewhere(self):
        shared = self.client.get('/api/share/meal-plan').json()
        self.assertTrue(shared["url"].startswith("simplemeal://meal-plan?data="))
        self.assertIn("🌙 Chili", shared["text"])
        self.assertTrue(shared["text"].rstrip().endswith(shared["url"]))

        # a second installation
        other = InMemoryRepository()
        app.dependency_overrides[get_repository] = lambda: other
        preview = self.client.post('/api/import/preview', json={"url": shared["url"]}).json()
        self.assertEqual(preview["kind"], "meal-plan")
        self.assertEqual(preview["summary"], 1)
        self.assertEqual(preview["payload"]["meals"][0]["ingredients"], ["Beans"])
        self.assertEqual(other.query(Meal), [])

        confirmed = self.client.post('/api/import/confirm', json={"url": shared["url"]}).json()
        self.assertEqual(confirmed["imported"], {"items": 1, "meals": 1, "scheduled_meals": 1, "shopping_items": 0})
        self.assertEqual(other.query(ScheduledMeal)[0].date, self.day)

    def test_share_meal_plan_purges_orphans(self):
        self.repo.insert(ScheduledMeal(self.day, "deleted-meal"))
        shared = self.client.get('/api/share/meal-plan').json()
        self.assertIn("🌙 Chili", shared["text"])
        self.assertEqual([s.meal_id for s in self.repo.query(ScheduledMeal)], [self.meal.id])

    def test_malformed_link_is_400(self):
        resp = self.client.post('/api/import/preview', json={"url": "simplemeal://[meal?data=abc"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "bad_url")

    def test_share_shopping_list_and_meal(self):
        shared = self.client.get('/api/share/shopping-list').json()
        self.assertIn("✅ Milk (x2)", shared["text"])
        meal = self.client.get(f"/api/share/meal/{self.meal.id}").json()
        self.assertTrue(meal["url"].startswith("simplemeal://meal?data="))
        self.assertEqual(self.client.get('/api/share/meal/unknown').status_code, 404)

    def test_bad_link_is_400(self):
        resp = self.client.post('/api/import/preview', json={"url": "https://example.com/meal?data=x"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "bad_scheme")

        resp = self.client.post('/api/import/confirm', json={"url": "simplemeal://meal?data=%%%"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "bad_encoding")

    def test_failed_save_is_500_and_writes_nothing(self):
        url = self.client.get(f"/api/share/meal/{self.meal.id}").json()["url"]
        failing = FailingRepository()
        app.dependency_overrides[get_repository] = lambda: failing
        resp = self.client.post('/api/import/confirm', json={"url": url})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["error"], "persistence")
        self.assertEqual(failing.query(Meal), [])


class TestExportApi(ExchangeApiTestCase):
    def test_shopping_list_csv_download(self):
        resp = self.client.get('/api/export/shopping-list.csv')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers["content-type"].startswith("text/csv"))
        self.assertIn('attachment; filename="shopping-list-', resp.headers["content-disposition"])
        self.assertEqual(resp.text.splitlines(), ["Item,Category,Count,Checked", '"Milk","Dairy & Eggs",2,Yes'])

    def test_meal_plan_csv_and_pdf(self):
        rows = self.client.get('/api/export/meal-plan.csv').text.splitlines()
        self.assertEqual(rows[1], '"2026-10-19","Chili","Dinner","Spicy","Beans"')
        pdf = self.client.get('/api/export/meal-plan.pdf')
        self.assertEqual(pdf.headers["content-type"], "application/pdf")
        self.assertTrue(pdf.content.startswith(b"%PDF"))

    def test_unknown_document(self):
        self.assertEqual(self.client.get('/api/export/recipes.csv').status_code, 404)

    def test_save_to_temp_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("simplemeal.utilities.export_files.tempfile.gettempdir", return_value=tmp):
                data = self.client.post('/api/export/meal-plan-detailed.txt').json()
            path = Path(data["path"])
            self.assertEqual(path.parent, Path(tmp))
            self.assertIn("🌙 CHILI", path.read_text(encoding="utf-8"))


if __name__ == '__main__':
    unittest.main()
