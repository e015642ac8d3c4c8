from __future__ import annotations
import calendar
from datetime import date, datetime, timezone
from typing import Tuple, Union

DayLike = Union[date, datetime, str, int, float]


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def to_day(value: DayLike) -> date:
    """
    Normalise a date, datetime, ISO string ("YYYY-MM-DD" or a full ISO
    datetime) or Unix timestamp (seconds, UTC) to a calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a valid day")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    if isinstance(value, str):
        s = value.strip()
        try:
            return datetime.strptime(s, "%Y-%m-%d").date()
        except ValueError:
            pass
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(s).date()
        except ValueError as e:
            raise ValueError(f"Unrecognised date string: {value!r}") from e
    raise TypeError(f"Unsupported day value: {type(value).__name__}")


def day_param(value: DayLike) -> str:
    return to_day(value).isoformat()


def month_bounds(month: int, year: int) -> Tuple[date, date]:
    # monthrange accounts for leap years
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)
