"""Calendar helpers shared by the planner logic."""
from datetime import date, datetime, time, timedelta
from typing import Union

DateLike = Union[date, datetime]


def start_of_day(value: DateLike) -> datetime:
    """Midnight of the calendar day containing ``value`` (naive, local time)."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative when end is earlier)."""
    return (start_of_day(end) - start_of_day(start)).days


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return start_of_day(a) == start_of_day(b)


def day_range(start: DateLike, number_of_days: int):
    first = start_of_day(start)
    return [first + timedelta(days=offset) for offset in range(max(number_of_days, 0))]


def to_epoch(value: datetime) -> float:
    return value.timestamp()


def from_epoch(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds)


def full_date(value: DateLike) -> str:
    """Long date used in shared text, e.g. 'Monday, October 19, 2026'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"
