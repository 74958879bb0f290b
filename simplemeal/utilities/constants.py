from typing import Final

CSV_DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_NUMBER_OF_DAYS: Final[int] = 7

# Entitlement limits
FREE_MAX_MEALS_PER_DAY: Final[int] = 1
PREMIUM_MAX_MEALS_PER_DAY: Final[int] = 5
FREE_MAX_PLANNING_DAYS: Final[int] = 7
PREMIUM_MAX_PLANNING_DAYS: Final[int] = 30

# Deep link hosts
KIND_MEAL_PLAN: Final[str] = "meal-plan"
KIND_SHOPPING_LIST: Final[str] = "shopping-list"
KIND_MEAL: Final[str] = "meal"

ITEM_CATEGORIES: Final[list[str]] = [
    # Food
    "Produce",
    "Meat & Seafood",
    "Dairy & Eggs",
    "Pantry",
    "Grains & Pasta",
    "Canned Goods",
    "Frozen Foods",
    "Condiments",
    "Spices & Herbs",
    "Baking",
    "Beverages",
    "Snacks",
    # Household
    "Cleaning Supplies",
    "Paper & Plastic",
    "Household Essentials",
    "Personal Care",
    "Pet Supplies",
    "Baby Items",
]

CATEGORY_EMOJI: Final[dict[str, str]] = {
    "Produce": "🥬",
    "Meat & Seafood": "🍖",
    "Dairy & Eggs": "🥛",
    "Pantry": "🥫",
    "Grains & Pasta": "🌾",
    "Canned Goods": "🥫",
    "Frozen Foods": "🧊",
    "Condiments": "🫗",
    "Spices & Herbs": "🌿",
    "Baking": "🥖",
    "Beverages": "🥤",
    "Snacks": "🍿",
    "Cleaning Supplies": "🧼",
    "Paper & Plastic": "🧻",
    "Household Essentials": "🏠",
    "Personal Care": "🧴",
    "Pet Supplies": "🐾",
    "Baby Items": "🍼",
}
FALLBACK_EMOJI: Final[str] = "🛒"
