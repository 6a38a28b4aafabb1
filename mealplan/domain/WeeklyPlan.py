"""WeeklyPlan domain entity: ISO date -> DayPlan mapping (order irrelevant, dates unique)."""
from typing import Dict, Iterator, Optional

from mealplan.domain.DayPlan import DayPlan


class WeeklyPlan:
    def __init__(self, days: Optional[Dict[str, DayPlan]] = None):
        self.days = dict(days) if days else {}

    def get(self, date: str) -> DayPlan:
        return self.days.get(date) or DayPlan()

    def set(self, date: str, plan: DayPlan) -> None:
        self.days[date] = plan

    def dates(self) -> Iterator[str]:
        return iter(sorted(self.days))

    def __contains__(self, date) -> bool:
        return date in self.days

    def __len__(self) -> int:
        return len(self.days)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {date: plan.to_dict() for date, plan in self.days.items()}
