"""Deep-link codec for sharing meal plans, shopping lists and single meals.

Link format: ``<scheme>://<kind>?data=<base64 of compact JSON>`` where kind is
``meal-plan``, ``shopping-list`` or ``meal``. Decoding never touches the
datastore; it yields an ImportCandidate the user confirms first
(see importer.apply_import).
"""
import base64
import binascii
import json
import logging
from typing import Iterable, Mapping, NamedTuple, Optional, Union
from urllib.parse import quote, unquote, urlsplit

from pydantic import ValidationError

from simplemeal.domain.Meal import Meal
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.logic.exchange.payloads import (
    MealPlanEntry, MealPlanPayload, ShoppingListEntry, ShoppingListPayload, MealPayload
)
from simplemeal.utilities.config import URL_SCHEME
from simplemeal.utilities.constants import KIND_MEAL_PLAN, KIND_SHOPPING_LIST, KIND_MEAL
from simplemeal.utilities.dates import to_epoch
from simplemeal.utilities.errors import DeepLinkError

logger = logging.getLogger(__name__)

Payload = Union[MealPlanPayload, ShoppingListPayload, MealPayload]

PAYLOAD_TYPES = {
    KIND_MEAL_PLAN: MealPlanPayload,
    KIND_SHOPPING_LIST: ShoppingListPayload,
    KIND_MEAL: MealPayload,
}
KIND_BY_TYPE = {v: k for k, v in PAYLOAD_TYPES.items()}


class ImportCandidate(NamedTuple):
    kind: str
    payload: Payload
    summary: Union[int, str]  # meals count, items count, or the meal name

    def describe(self) -> str:
        if self.kind == KIND_MEAL_PLAN:
            return f"Meal plan with {self.summary} meal(s)"
        if self.kind == KIND_SHOPPING_LIST:
            return f"Shopping list with {self.summary} item(s)"
        return f"Meal '{self.summary}'"


# --- Entities -> payloads -------------------------------------------------

def build_meal_plan_payload(scheduled_meals: Iterable[ScheduledMeal], meals: Mapping[str, Meal]) -> MealPlanPayload:
    """Scheduled meals whose meal is missing from ``meals`` are left out."""
    entries = []
    dates = set()
    for scheduled in scheduled_meals:
        meal = meals.get(scheduled.meal_id)
        if meal is None:
            continue
        entries.append(MealPlanEntry(
            name=meal.name,
            description=meal.description,
            category=meal.category.value,
            ingredient_names=meal.ingredient_names,
            date=to_epoch(scheduled.date),
            meal_time=to_epoch(scheduled.meal_time),
        ))
        dates.add(to_epoch(scheduled.date))
    return MealPlanPayload(meals=entries, date_range=sorted(dates))


def build_shopping_list_payload(items: Iterable[ShoppingListItem]) -> ShoppingListPayload:
    return ShoppingListPayload(items=[
        ShoppingListEntry(name=item.name, category=item.category, count=item.count) for item in items
    ])


def build_meal_payload(meal: Meal) -> MealPayload:
    return MealPayload(
        name=meal.name,
        description=meal.description,
        category=meal.category.value,
        ingredient_names=meal.ingredient_names,
    )


# --- Payloads <-> transport string ---------------------------------------

def encode_payload(payload: Payload) -> str:
    return base64.b64encode(payload.to_json().encode("utf-8")).decode("ascii")


def _b64decode(data: str) -> bytes:
    # Tolerate '+' turned into ' ' by form decoding, URL-safe alphabet and stripped padding
    cleaned = data.strip().replace(" ", "+").replace("-", "+").replace("_", "/")
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned, validate=True)


def decode_payload(kind: str, data: str) -> Payload:
    payload_type = PAYLOAD_TYPES.get(kind)
    if payload_type is None:
        raise DeepLinkError("unknown_kind", f"Unknown link kind: {kind!r}")
    try:
        raw = _b64decode(data)
    except (binascii.Error, ValueError) as e:
        raise DeepLinkError("bad_encoding", f"Link data is not base64: {e}") from e
    try:
        return payload_type.model_validate_json(raw)
    except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DeepLinkError("bad_payload", f"Link data is not a valid {kind} payload: {e}") from e


# --- URLs ------------------------------------------------------------------

def build_url(payload: Payload, scheme: str = URL_SCHEME) -> str:
    kind = KIND_BY_TYPE[type(payload)]
    # '+', '/' and '=' stay raw, matching links produced by the mobile app
    return f"{scheme}://{kind}?data={quote(encode_payload(payload), safe='+/=')}"


def meal_plan_url(scheduled_meals: Iterable[ScheduledMeal], meals: Mapping[str, Meal], scheme: str = URL_SCHEME) -> str:
    return build_url(build_meal_plan_payload(scheduled_meals, meals), scheme)


def shopping_list_url(items: Iterable[ShoppingListItem], scheme: str = URL_SCHEME) -> str:
    return build_url(build_shopping_list_payload(items), scheme)


def meal_url(meal: Meal, scheme: str = URL_SCHEME) -> str:
    return build_url(build_meal_payload(meal), scheme)


def _query_param(query: str, name: str) -> Optional[str]:
    # parse_qs would turn '+' into spaces and corrupt base64
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if sep and unquote(key) == name:
            return unquote(value)
    return None


def summarize(kind: str, payload: Payload) -> Union[int, str]:
    if kind == KIND_MEAL_PLAN:
        return len(payload.meals)
    if kind == KIND_SHOPPING_LIST:
        return len(payload.items)
    return payload.name


def parse_deep_link(url: str, scheme: str = URL_SCHEME) -> ImportCandidate:
    """Validate and decode a share link. Raises DeepLinkError; writes nothing."""
    try:
        parts = urlsplit(url or "")
    except ValueError as e:
        raise DeepLinkError("bad_url", f"Malformed link {url!r}: {e}") from e
    if parts.scheme != scheme.lower():
        raise DeepLinkError("bad_scheme", f"Not a {scheme}:// link: {url!r}")
    kind = parts.netloc
    if kind not in PAYLOAD_TYPES:
        raise DeepLinkError("unknown_kind", f"Unknown link kind: {kind!r}")
    data = _query_param(parts.query, "data")
    if not data:
        raise DeepLinkError("missing_data", "Link has no data parameter")
    payload = decode_payload(kind, data)
    return ImportCandidate(kind, payload, summarize(kind, payload))


def handle_url(url: str, scheme: str = URL_SCHEME) -> Optional[ImportCandidate]:
    """Like parse_deep_link, but reports failure as None (logged) instead of raising."""
    try:
        return parse_deep_link(url, scheme)
    except DeepLinkError as e:
        logger.warning(f"Ignoring share link ({e.reason}): {e}")
        return None


__all__ = [
    'ImportCandidate', 'PAYLOAD_TYPES',
    'build_meal_plan_payload', 'build_shopping_list_payload', 'build_meal_payload',
    'encode_payload', 'decode_payload', 'build_url',
    'meal_plan_url', 'shopping_list_url', 'meal_url',
    'parse_deep_link', 'handle_url', 'summarize'
]
