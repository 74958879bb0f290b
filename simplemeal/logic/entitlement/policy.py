"""Entitlement policy: planning limits derived from subscription state.

All functions are pure predicates. They advise the caller, who must check
them before scheduling; nothing here raises or writes.
"""
from __future__ import annotations
from datetime import datetime
from typing import NamedTuple, Optional

from simplemeal.utilities.constants import (
    FREE_MAX_MEALS_PER_DAY, PREMIUM_MAX_MEALS_PER_DAY,
    FREE_MAX_PLANNING_DAYS, PREMIUM_MAX_PLANNING_DAYS
)
from simplemeal.utilities.dates import DateLike, days_between

__all__ = [
    "max_meals_per_day", "can_add_multiple_meals", "can_plan_for_date", "max_planning_days",
    "check_can_schedule", "check_planning_days", "ScheduleDecision", "EntitlementPolicy",
    "REASON_DATE_OUT_OF_RANGE", "REASON_MEAL_LIMIT_REACHED", "REASON_TOO_MANY_DAYS",
]

REASON_DATE_OUT_OF_RANGE = "date_out_of_range"
REASON_MEAL_LIMIT_REACHED = "meal_limit_reached"
REASON_TOO_MANY_DAYS = "too_many_days"


def max_meals_per_day(is_premium: bool) -> int:
    return PREMIUM_MAX_MEALS_PER_DAY if is_premium else FREE_MAX_MEALS_PER_DAY


def can_add_multiple_meals(is_premium: bool, current_count: int) -> bool:
    return current_count < max_meals_per_day(is_premium)


def can_plan_for_date(is_premium: bool, target: DateLike, today: Optional[DateLike] = None) -> bool:
    """Premium: any date. Free: today through 6 days ahead (offset 0..6)."""
    if is_premium:
        return True
    offset = days_between(today or datetime.now(), target)
    return 0 <= offset < FREE_MAX_PLANNING_DAYS


def max_planning_days(is_premium: bool) -> int:
    return PREMIUM_MAX_PLANNING_DAYS if is_premium else FREE_MAX_PLANNING_DAYS


class ScheduleDecision(NamedTuple):
    allowed: bool
    reason: Optional[str] = None


def check_can_schedule(is_premium: bool, target: DateLike, current_count: int,
                       today: Optional[DateLike] = None) -> ScheduleDecision:
    """Date window first, then the per-day meal count; the reason tells the UI which paywall to show."""
    if not can_plan_for_date(is_premium, target, today):
        return ScheduleDecision(False, REASON_DATE_OUT_OF_RANGE)
    if not can_add_multiple_meals(is_premium, current_count):
        return ScheduleDecision(False, REASON_MEAL_LIMIT_REACHED)
    return ScheduleDecision(True)


def check_planning_days(is_premium: bool, number_of_days: int) -> ScheduleDecision:
    if number_of_days > max_planning_days(is_premium):
        return ScheduleDecision(False, REASON_TOO_MANY_DAYS)
    return ScheduleDecision(True)


class EntitlementPolicy:
    """Snapshot of the policy for one subscription state.

    Built from a subscription service each time it is needed, so a refresh of
    the service is picked up on the next check.
    """

    def __init__(self, is_premium: bool, today: Optional[DateLike] = None):
        self.is_premium = is_premium
        self.today = today

    @classmethod
    def from_subscription(cls, subscription, today: Optional[DateLike] = None) -> "EntitlementPolicy":
        return cls(bool(subscription.is_premium), today)

    def max_meals_per_day(self) -> int:
        return max_meals_per_day(self.is_premium)

    def can_add_multiple_meals(self, current_count: int) -> bool:
        return can_add_multiple_meals(self.is_premium, current_count)

    def can_plan_for_date(self, target: DateLike) -> bool:
        return can_plan_for_date(self.is_premium, target, self.today)

    def max_planning_days(self) -> int:
        return max_planning_days(self.is_premium)

    def check_can_schedule(self, target: DateLike, current_count: int) -> ScheduleDecision:
        return check_can_schedule(self.is_premium, target, current_count, self.today)

    def check_planning_days(self, number_of_days: int) -> ScheduleDecision:
        return check_planning_days(self.is_premium, number_of_days)

    def to_dict(self):
        return {
            "is_premium": self.is_premium,
            "max_meals_per_day": self.max_meals_per_day(),
            "max_planning_days": self.max_planning_days(),
        }
