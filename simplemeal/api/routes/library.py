from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from simplemeal.api.dependencies import get_repository
from simplemeal.api.views import item_view, meal_view
from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal, MealCategory
from simplemeal.logic.library.catalog import create_item, create_meal, delete_entity, library_items
from simplemeal.utilities.constants import ITEM_CATEGORIES
from simplemeal.utilities.validators import ItemInput, MealInput

router = APIRouter()


@router.get('/api/categories')
def list_categories():
    return {
        "item_categories": ITEM_CATEGORIES,
        "meal_categories": [c.value for c in MealCategory],
    }


# -------------------- Items --------------------
@router.get('/api/items')
def list_items(category: Optional[str] = Query(default=None), repo=Depends(get_repository)):
    return [item_view(item) for item in library_items(repo, category)]


@router.post('/api/items', status_code=201)
def add_item(payload: ItemInput, repo=Depends(get_repository)):
    item = create_item(repo, payload.name, payload.category, payload.custom_emoji)
    return item_view(item)


@router.delete('/api/items/{item_id}')
def remove_item(item_id: str, repo=Depends(get_repository)):
    if not delete_entity(repo, Item, item_id):
        raise HTTPException(status_code=404, detail='Item not found')
    return {"deleted": item_id}


# -------------------- Meals --------------------
@router.get('/api/meals')
def list_meals(repo=Depends(get_repository)):
    meals = repo.query(Meal, sort_key=lambda meal: meal.name.lower())
    return [meal_view(meal) for meal in meals]


@router.get('/api/meals/{meal_id}')
def get_meal(meal_id: str, repo=Depends(get_repository)):
    meal = repo.get(Meal, meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail='Meal not found')
    return meal_view(meal)


@router.post('/api/meals', status_code=201)
def add_meal(payload: MealInput, repo=Depends(get_repository)):
    try:
        meal = create_meal(repo, payload.name, payload.description, payload.category, payload.ingredient_ids)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=f'Unknown item: {e.args[0]}')
    return meal_view(meal)


@router.delete('/api/meals/{meal_id}')
def remove_meal(meal_id: str, repo=Depends(get_repository)):
    # scheduled meals of this meal become orphans and are purged on the next read
    if not delete_entity(repo, Meal, meal_id):
        raise HTTPException(status_code=404, detail='Meal not found')
    return {"deleted": meal_id}
