"""JSON views of the domain entities for API responses."""
from simplemeal.domain.Item import Item
from simplemeal.domain.Meal import Meal
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem


def item_view(item: Item) -> dict:
    data = item.to_dict()
    data["display_emoji"] = item.display_emoji
    return data


def meal_view(meal: Meal) -> dict:
    data = meal.to_dict()
    data["icon"] = meal.category.icon
    data["has_image"] = data.pop("image_data") is not None
    data["ingredients"] = [item_view(ing) for ing in meal.ingredients]
    return data


def scheduled_view(scheduled: ScheduledMeal, meal: Meal) -> dict:
    data = scheduled.to_dict()
    data["meal"] = meal_view(meal)
    return data


def shopping_item_view(item: ShoppingListItem) -> dict:
    data = item.to_dict()
    data["display_emoji"] = item.display_emoji
    data["formatted_count"] = item.formatted_count
    return data
