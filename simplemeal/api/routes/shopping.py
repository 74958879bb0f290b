from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from simplemeal.api.dependencies import get_event_bus, get_repository, local_time
from simplemeal.api.views import shopping_item_view
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.logic.library.catalog import delete_entity
from simplemeal.logic.shopping.list_builder import (
    add_library_items, clear_shopping_list, generate_shopping_list
)
from simplemeal.utilities.validators import GenerateInput, LibraryItemsInput, ShoppingListItemInput

router = APIRouter()


def _list_view(repo) -> dict:
    items = repo.query(ShoppingListItem, sort_key=lambda i: (i.category, i.name))
    return {
        "items": [shopping_item_view(i) for i in items],
        "checked": sum(i.count for i in items if i.is_checked),
        "total": sum(i.count for i in items),
    }


def _get_item(repo, item_id: str) -> ShoppingListItem:
    item = repo.get(ShoppingListItem, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail='Shopping list item not found')
    return item


@router.get('/api/shopping-list')
def get_shopping_list(repo=Depends(get_repository)):
    return _list_view(repo)


@router.post('/api/shopping-list/generate')
def generate(payload: Optional[GenerateInput] = Body(default=None), repo=Depends(get_repository),
             bus=Depends(get_event_bus)):
    """Replace the list with the ingredients of the plan window (settings window by default)."""
    settings = repo.settings()
    start = local_time(payload.start) if payload and payload.start else settings.start
    end = local_time(payload.end) if payload and payload.end else settings.end
    result = generate_shopping_list(repo, start, end, bus=bus)
    data = _list_view(repo)
    data["orphans_removed"] = len(result.orphans)
    return data


@router.post('/api/shopping-list/items')
def add_from_library(payload: LibraryItemsInput, repo=Depends(get_repository)):
    add_library_items(repo, payload.item_ids)
    return _list_view(repo)


@router.post('/api/shopping-list/entries', status_code=201)
def add_entry(payload: ShoppingListItemInput, repo=Depends(get_repository)):
    with repo.transaction():
        item = repo.insert(ShoppingListItem(name=payload.name, count=payload.count, category=payload.category))
    return shopping_item_view(item)


@router.post('/api/shopping-list/{item_id}/increment')
def increment(item_id: str, repo=Depends(get_repository)):
    item = _get_item(repo, item_id)
    with repo.transaction():
        item.increment()
    return shopping_item_view(item)


@router.post('/api/shopping-list/{item_id}/decrement')
def decrement(item_id: str, repo=Depends(get_repository)):
    item = _get_item(repo, item_id)
    with repo.transaction():
        item.decrement()
    return shopping_item_view(item)


@router.post('/api/shopping-list/{item_id}/toggle')
def toggle(item_id: str, repo=Depends(get_repository)):
    item = _get_item(repo, item_id)
    with repo.transaction():
        item.toggle_checked()
    return shopping_item_view(item)


@router.delete('/api/shopping-list/{item_id}')
def remove_entry(item_id: str, repo=Depends(get_repository)):
    if not delete_entity(repo, ShoppingListItem, item_id):
        raise HTTPException(status_code=404, detail='Shopping list item not found')
    return {"deleted": item_id}


@router.delete('/api/shopping-list')
def clear(repo=Depends(get_repository)):
    return {"removed": clear_shopping_list(repo)}
