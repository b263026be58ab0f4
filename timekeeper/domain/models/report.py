"""
Report value objects.
Derived, never persisted.
"""

import calendar
from dataclasses import dataclass, field
from typing import List, Optional

from timekeeper.domain.models.account import Account
from timekeeper.domain.models.base import InvalidFormatError
from timekeeper.domain.models.time_entry import TimeEntry


@dataclass
class ReportStat:
    """Aggregated totals for one account (or a group of accounts) over a period."""

    total_hours: float = 0.0
    total_days: int = 0
    regular_days: int = 0
    overtime_days: int = 0

    @property
    def average_hours(self) -> Optional[float]:
        """Hours per day, or None when there is no data."""
        if self.total_days == 0:
            return None
        return self.total_hours / self.total_days

    @property
    def is_empty(self) -> bool:
        return self.total_days == 0


@dataclass(frozen=True)
class ReportPeriod:
    """A calendar month."""

    month: int
    year: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidFormatError("Month must be between 1 and 12", "month")
        if not 1 <= self.year <= 9999:
            raise InvalidFormatError("Invalid year", "year")

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def label(self) -> str:
        return f"{self.month_name} {self.year}"


@dataclass
class OwnerReport:
    """Everything a renderer needs for one account."""

    account: Account
    period: ReportPeriod
    stat: ReportStat
    entries: List[TimeEntry] = field(default_factory=list)
