"""Calendar-week bucketing for the weekly trend variant."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

MONDAY = 0
SUNDAY = 6


def validate_week_start(week_start: int) -> None:
    if not 0 <= week_start <= 6:
        raise ValueError(f"week_start must fall within [0, 6] (Monday=0), got {week_start}.")


def floor_to_week(value: Union[date, datetime], week_start: int = MONDAY) -> date:
    """Return the first day of the calendar week enclosing ``value``.

    ``week_start`` follows :meth:`date.weekday` numbering, so the default
    Monday start matches ISO weeks and ``SUNDAY`` gives US-style weeks.
    """
    validate_week_start(week_start)
    day = value.date() if isinstance(value, datetime) else value
    offset = (day.weekday() - week_start) % 7
    return day - timedelta(days=offset)


__all__ = ["MONDAY", "SUNDAY", "floor_to_week", "validate_week_start"]
