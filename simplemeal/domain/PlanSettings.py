"""PlanSettings: the active planning window (start date + number of days), one per installation."""
from datetime import datetime
from typing import List, Optional

from simplemeal.utilities.constants import DEFAULT_NUMBER_OF_DAYS
from simplemeal.utilities.dates import day_range, start_of_day


class PlanSettings:
    def __init__(self, selected_date: Optional[datetime] = None, number_of_days: int = DEFAULT_NUMBER_OF_DAYS):
        self.selected_date = selected_date or datetime.now()
        self.number_of_days = number_of_days

    @property
    def date_range(self) -> List[datetime]:
        return day_range(self.selected_date, self.number_of_days)

    @property
    def start(self) -> datetime:
        return start_of_day(self.selected_date)

    @property
    def end(self) -> datetime:
        days = self.date_range
        return days[-1] if days else self.start

    def __str__(self) -> str:
        return f"Plan from {self.start:%Y-%m-%d} for {self.number_of_days} days"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        selected = d.get("selected_date")
        return PlanSettings(
            selected_date=datetime.fromisoformat(selected) if selected else None,
            number_of_days=int(d.get("number_of_days", DEFAULT_NUMBER_OF_DAYS)),
        )

    def to_dict(self):
        return {
            "selected_date": self.selected_date.isoformat(),
            "number_of_days": self.number_of_days,
        }
