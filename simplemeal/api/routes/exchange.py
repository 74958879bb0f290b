"""Share links out, imports in.

Import is two-step: preview decodes the link without touching the store,
confirm writes it in one transaction.
"""
from fastapi import APIRouter, Depends, HTTPException

from simplemeal.api.dependencies import get_event_bus, get_repository
from simplemeal.domain.Meal import Meal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.logic.exchange.codec import meal_plan_url, meal_url, parse_deep_link, shopping_list_url
from simplemeal.logic.exchange.importer import apply_import
from simplemeal.logic.reporting.share_text import (
    meal_plan_text, meal_text, shopping_list_text, with_import_link
)
from simplemeal.logic.shopping.list_builder import scheduled_meals_between
from simplemeal.utilities.validators import ImportInput

router = APIRouter()


def plan_in_window(repo, bus=None):
    """Scheduled meals of the settings window in (date, meal_time) order, orphans purged."""
    settings = repo.settings()
    return scheduled_meals_between(repo, settings.start, settings.end, bus=bus), settings.date_range


@router.get('/api/share/meal-plan')
def share_meal_plan(repo=Depends(get_repository), bus=Depends(get_event_bus)):
    scheduled, date_range = plan_in_window(repo, bus)
    meals = repo.meals_by_id()
    url = meal_plan_url(scheduled, meals)
    return {"url": url, "text": with_import_link(meal_plan_text(scheduled, meals, date_range), url)}


@router.get('/api/share/shopping-list')
def share_shopping_list(repo=Depends(get_repository)):
    items = repo.query(ShoppingListItem, sort_key=lambda i: (i.category, i.name))
    url = shopping_list_url(items)
    return {"url": url, "text": with_import_link(shopping_list_text(items), url)}


@router.get('/api/share/meal/{meal_id}')
def share_meal(meal_id: str, repo=Depends(get_repository)):
    meal = repo.get(Meal, meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail='Meal not found')
    url = meal_url(meal)
    return {"url": url, "text": with_import_link(meal_text(meal), url)}


@router.post('/api/import/preview')
def preview_import(payload: ImportInput):
    candidate = parse_deep_link(payload.url)
    return {
        "kind": candidate.kind,
        "summary": candidate.summary,
        "description": candidate.describe(),
        "payload": candidate.payload.model_dump(by_alias=True),
    }


@router.post('/api/import/confirm')
def confirm_import(payload: ImportInput, repo=Depends(get_repository), bus=Depends(get_event_bus)):
    candidate = parse_deep_link(payload.url)
    result = apply_import(candidate, repo, bus=bus)
    return {"kind": candidate.kind, "imported": result._asdict()}
