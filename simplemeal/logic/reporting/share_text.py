"""Text and CSV renderings of the meal plan and shopping list for sharing.

Pure functions: inputs are never modified and the same input always gives
the same output. Meal-plan renderers take the scheduled meals, a meal lookup
by id (unresolvable entries are skipped) and the dates to render.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from simplemeal.domain.Meal import Meal
from simplemeal.domain.ScheduledMeal import ScheduledMeal
from simplemeal.domain.ShoppingListItem import ShoppingListItem
from simplemeal.utilities.constants import CSV_DATE_FORMAT
from simplemeal.utilities.dates import DateLike, full_date, is_same_day

RULE = "═══════════════════════════════"
THIN_RULE = "───────────────────────────────"
FOOTER = "Created with Meal Planner App 📱"


def meals_for_date(scheduled_meals: Iterable[ScheduledMeal], meals: Mapping[str, Meal],
                   day: DateLike) -> List[Tuple[ScheduledMeal, Meal]]:
    """(scheduled, meal) pairs of one day ordered by meal_time."""
    pairs = [
        (s, meals[s.meal_id]) for s in scheduled_meals
        if is_same_day(s.date, day) and s.meal_id in meals
    ]
    return sorted(pairs, key=lambda pair: pair[0].meal_time)


def _by_category(items: Iterable[ShoppingListItem]) -> List[Tuple[str, List[ShoppingListItem]]]:
    grouped: Dict[str, List[ShoppingListItem]] = defaultdict(list)
    for item in items:
        grouped[item.category].append(item)
    return [(category, sorted(grouped[category], key=lambda i: i.name)) for category in sorted(grouped)]


def _count_suffix(item: ShoppingListItem) -> str:
    return f" (x{item.count})" if item.count > 1 else ""


def _csv_field(value) -> str:
    return '"' + str(value).replace('"', '""') + '"'


# --- Meal plan --------------------------------------------------------------

def meal_plan_text(scheduled_meals: Sequence[ScheduledMeal], meals: Mapping[str, Meal],
                   date_range: Iterable[DateLike]) -> str:
    lines = ["🍽️ MY MEAL PLAN", RULE, ""]
    for day in date_range:
        lines.append(f"📅 {full_date(day)}")
        todays = meals_for_date(scheduled_meals, meals, day)
        if not todays:
            lines.append("   No meals planned")
        for _, meal in todays:
            lines.append(f"   {meal.category.icon} {meal.name}")
        lines.append("")
    lines += [RULE, FOOTER]
    return "\n".join(lines) + "\n"


def _meal_block(meal: Meal) -> List[str]:
    lines = [f"{meal.category.icon} {meal.name.upper()}"]
    if meal.description:
        lines.append(f"   {meal.description}")
    if meal.ingredients:
        lines.append("   Ingredients:")
        lines += [f"   • {name}" for name in meal.ingredient_names]
    return lines


def detailed_meal_plan_text(scheduled_meals: Sequence[ScheduledMeal], meals: Mapping[str, Meal],
                            date_range: Iterable[DateLike]) -> str:
    lines = ["🍽️ MY MEAL PLAN (DETAILED)", RULE, ""]
    for day in date_range:
        todays = meals_for_date(scheduled_meals, meals, day)
        if not todays:
            continue
        lines += [f"📅 {full_date(day)}", THIN_RULE]
        for _, meal in todays:
            lines += _meal_block(meal)
            lines.append("")
    lines += [RULE, FOOTER]
    return "\n".join(lines) + "\n"


def meal_text(meal: Meal) -> str:
    return "\n".join(_meal_block(meal) + ["", FOOTER]) + "\n"


def meal_plan_csv(scheduled_meals: Sequence[ScheduledMeal], meals: Mapping[str, Meal],
                  date_range: Iterable[DateLike]) -> str:
    rows = ["Date,Meal,Category,Description,Ingredients"]
    for day in date_range:
        for _, meal in meals_for_date(scheduled_meals, meals, day):
            rows.append(",".join(_csv_field(v) for v in (
                day.strftime(CSV_DATE_FORMAT),
                meal.name,
                meal.category.value,
                meal.description,
                "; ".join(meal.ingredient_names),
            )))
    return "\n".join(rows) + "\n"


# --- Shopping list ----------------------------------------------------------

def shopping_list_text(items: Sequence[ShoppingListItem]) -> str:
    """Detailed list: checkboxes per item and a progress line."""
    lines = ["🛒 MY SHOPPING LIST", RULE, ""]
    for category, category_items in _by_category(items):
        lines += [f"📦 {category.upper()}", THIN_RULE]
        for item in category_items:
            checkbox = "✅" if item.is_checked else "☐"
            lines.append(f"{checkbox} {item.name}{_count_suffix(item)}")
        lines.append("")
    total = sum(item.count for item in items)
    purchased = sum(item.count for item in items if item.is_checked)
    lines += [RULE, f"Progress: {purchased}/{total} items", FOOTER]
    return "\n".join(lines) + "\n"


def simple_shopping_list_text(items: Sequence[ShoppingListItem]) -> str:
    lines = ["🛒 SHOPPING LIST", ""]
    for category, category_items in _by_category(items):
        lines.append(f"{category}:")
        lines += [f"• {item.name}{_count_suffix(item)}" for item in category_items]
        lines.append("")
    return "\n".join(lines) + "\n"


def shopping_list_csv(items: Sequence[ShoppingListItem]) -> str:
    rows = ["Item,Category,Count,Checked"]
    for item in sorted(items, key=lambda i: (i.category, i.name)):
        checked = "Yes" if item.is_checked else "No"
        rows.append(f"{_csv_field(item.name)},{_csv_field(item.category)},{item.count},{checked}")
    return "\n".join(rows) + "\n"


# --- Share messages ---------------------------------------------------------

def with_import_link(text: str, url: str) -> str:
    """Append the deep link so the recipient can import with one tap."""
    return f"{text}\n📲 Open in Meal Planner to import:\n{url}\n"


__all__ = [
    'meal_plan_text', 'detailed_meal_plan_text', 'meal_plan_csv', 'meal_text',
    'shopping_list_text', 'simple_shopping_list_text', 'shopping_list_csv',
    'with_import_link', 'meals_for_date'
]
