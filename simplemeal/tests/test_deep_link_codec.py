import base64
import json
import unittest
from datetime import datetime

from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal, MealCategory
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.logic.exchange.codec import (
    build_meal_plan_payload,
    decode_payload,
    encode_payload,
    handle_url,
    meal_plan_url,
    meal_url,
    parse_deep_link,
    shopping_list_url,
)
from simplemeal.logic.exchange.payloads import MealPayload
from simplemeal.utilities.errors import DeepLinkError


def _link(kind, document):
    data = base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")
    return f"simplemeal://{kind}?data={data}"


class TestDeepLinkRoundTrip(unittest.TestCase):
    def setUp(self):
        self.meal = Meal(
            name="Pancakes",
            description="Sunday special",
            category=MealCategory.BREAKFAST,
            ingredients=[Item("Flour", "Baking"), Item("Milk", "Dairy & Eggs")],
        )
        self.day = datetime(2026, 10, 19)

    def test_meal_plan(self):
        scheduled = [
            ScheduledMeal(self.day, self.meal.id, meal_time=self.day.replace(hour=8)),
            ScheduledMeal(self.day, self.meal.id, meal_time=self.day.replace(hour=9)),
        ]
        url = meal_plan_url(scheduled, {self.meal.id: self.meal})
        self.assertTrue(url.startswith("simplemeal://meal-plan?data="))

        candidate = parse_deep_link(url)
        self.assertEqual(candidate.kind, "meal-plan")
        self.assertEqual(candidate.summary, 2)
        entry = candidate.payload.meals[0]
        self.assertEqual(entry.name, "Pancakes")
        self.assertEqual(entry.category, "Breakfast")
        self.assertEqual(entry.ingredient_names, ["Flour", "Milk"])
        self.assertEqual(datetime.fromtimestamp(entry.meal_time), self.day.replace(hour=8))
        # one entry per distinct day
        self.assertEqual(candidate.payload.date_range, [self.day.timestamp()])

    def test_shopping_list(self):
        items = [ShoppingListItem("Milk", 2, "Dairy & Eggs", is_checked=True), ShoppingListItem("Bread")]
        candidate = parse_deep_link(shopping_list_url(items))
        self.assertEqual(candidate.kind, "shopping-list")
        self.assertEqual(candidate.summary, 2)
        self.assertEqual(
            [(e.name, e.category, e.count) for e in candidate.payload.items],
            [("Milk", "Dairy & Eggs", 2), ("Bread", "Pantry", 1)],
        )

    def test_single_meal(self):
        candidate = parse_deep_link(meal_url(self.meal))
        self.assertEqual(candidate.kind, "meal")
        self.assertEqual(candidate.summary, "Pancakes")
        self.assertEqual(candidate.describe(), "Meal 'Pancakes'")
        self.assertEqual(candidate.payload.description, "Sunday special")

    def test_orphaned_schedule_entries_are_left_out(self):
        scheduled = [ScheduledMeal(self.day, self.meal.id), ScheduledMeal(self.day, "gone")]
        payload = build_meal_plan_payload(scheduled, {self.meal.id: self.meal})
        self.assertEqual(len(payload.meals), 1)

    def test_wire_keys(self):
        wire = json.loads(base64.b64decode(encode_payload(MealPayload(name="Soup", ingredient_names=["Salt"]))))
        self.assertEqual(wire, {"name": "Soup", "description": "", "category": "Other", "ingredients": ["Salt"]})


class TestDeepLinkDecoding(unittest.TestCase):
    def test_alternate_key_spelling_is_accepted(self):
        url = _link("meal-plan", {
            "meals": [{"name": "Soup", "ingredientNames": ["Salt"], "date": 1790000000.0, "meal_time": 1790000000}],
            "dateRangeEpochs": [1790000000.0, 1790000000.0],
        })
        candidate = parse_deep_link(url)
        self.assertEqual(candidate.payload.meals[0].ingredient_names, ["Salt"])
        self.assertEqual(candidate.payload.date_range, [1790000000.0])

    def test_unknown_category_is_kept_for_the_importer(self):
        candidate = parse_deep_link(_link("meal", {"name": "Mystery", "category": "Brunch"}))
        self.assertEqual(candidate.payload.category, "Brunch")
        self.assertIs(MealCategory.parse(candidate.payload.category), MealCategory.OTHER)

    def test_plus_decoded_as_space_is_tolerated(self):
        # '>>>' encodes to 'Pj4+' so the data carries a '+'
        url = meal_url(Meal(name=">>>"))
        self.assertIn("+", url)
        candidate = parse_deep_link(url.replace("+", " "))
        self.assertEqual(candidate.payload.name, ">>>")

    def test_urlsafe_alphabet_and_missing_padding(self):
        data = base64.urlsafe_b64encode(json.dumps({"name": ">>>?"}).encode()).decode().rstrip("=")
        candidate = parse_deep_link(f"simplemeal://meal?data={data}")
        self.assertEqual(candidate.payload.name, ">>>?")

    def test_error_reasons(self):
        cases = {
            "simplemeal://[meal?data=abc": "bad_url",
            "https://meal?data=abc": "bad_scheme",
            "simplemeal://recipe?data=abc": "unknown_kind",
            "simplemeal://meal": "missing_data",
            "simplemeal://meal?data=": "missing_data",
            "simplemeal://meal?data=%%%": "bad_encoding",
            _link("meal", {"description": "no name"}): "bad_payload",
            _link("shopping-list", {"items": [{"name": "Milk", "count": "2"}]}): "bad_payload",
            "simplemeal://meal?data=" + base64.b64encode(b"not json").decode(): "bad_payload",
        }
        for url, reason in cases.items():
            with self.assertRaises(DeepLinkError, msg=url) as ctx:
                parse_deep_link(url)
            self.assertEqual(ctx.exception.reason, reason, url)

    def test_decode_payload_unknown_kind(self):
        with self.assertRaises(DeepLinkError) as ctx:
            decode_payload("recipe", "e30=")
        self.assertEqual(ctx.exception.reason, "unknown_kind")

    def test_handle_url_returns_none_on_failure(self):
        self.assertIsNone(handle_url("simplemeal://meal?data=%%%"))
        self.assertIsNone(handle_url("simplemeal://[meal?data=abc"))
        self.assertIsNotNone(handle_url(meal_url(Meal(name="Toast"))))


if __name__ == '__main__':
    unittest.main()
