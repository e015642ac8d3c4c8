from __future__ import annotations
import calendar
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Dict, Optional

from wistia_api.common.dates import month_bounds
from wistia_api.entity import APIEntity


@dataclass
class Stats(APIEntity):
    """All-time stats for an account, project or media."""

    FIELDS: ClassVar[Dict[str, str]] = {
        "load_count": "load_count",
        "play_count": "play_count",
        "hours_watched": "hours_watched",
    }

    load_count: Optional[int] = None
    play_count: Optional[int] = None
    hours_watched: Optional[float] = None


@dataclass
class DailyStats(Stats):
    FIELDS: ClassVar[Dict[str, str]] = {**Stats.FIELDS, "date": "date"}

    date: Optional[str] = None


@dataclass
class MonthlyStats(Stats):
    """
    One calendar month of stats. The API only reports per-day or all-time
    numbers, so these are built by summing DailyStats with add_day().
    """

    FIELDS: ClassVar[Dict[str, str]] = {**Stats.FIELDS, "month": "month", "year": "year"}

    month: int = 0
    year: int = 0

    def add_day(self, daily: Stats) -> None:
        self.load_count = (self.load_count or 0) + (daily.load_count or 0)
        self.play_count = (self.play_count or 0) + (daily.play_count or 0)
        self.hours_watched = (self.hours_watched or 0.0) + (daily.hours_watched or 0.0)

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def start_date(self) -> date:
        return month_bounds(self.month, self.year)[0]

    @property
    def end_date(self) -> date:
        return month_bounds(self.month, self.year)[1]
