"""ScheduledMeal domain entity: one meal (by id) assigned to a calendar day and a time-of-day slot."""
from datetime import datetime
from typing import Optional
from uuid import uuid4


class ScheduledMeal:
    def __init__(self, date: datetime, meal_id: str, meal_time: Optional[datetime] = None,
                 id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.date = date
        self.meal_id = meal_id
        # meal_time only orders meals within a day
        self.meal_time = meal_time if meal_time is not None else date

    def __str__(self) -> str:
        return f"ScheduledMeal {self.meal_id} on {self.date:%Y-%m-%d} at {self.meal_time:%H:%M}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        date = datetime.fromisoformat(d["date"])
        meal_time = datetime.fromisoformat(d["meal_time"]) if d.get("meal_time") else None
        return ScheduledMeal(date, d.get("meal_id", ""), meal_time, id=d.get("id"))

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "meal_time": self.meal_time.isoformat(),
            "meal_id": self.meal_id,
        }
