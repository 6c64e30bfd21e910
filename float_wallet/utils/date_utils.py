"""Date manipulation utilities"""

import math
from calendar import monthrange
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Tuple, Union

SECONDS_PER_DAY = 24 * 60 * 60


class DayOverflowPolicy(str, Enum):
    """What to do with a day-of-month the target month does not have"""

    ROLLOVER = "rollover"  # 31 April -> 1 May
    CLAMP = "clamp"  # 31 April -> 30 April


def add_months(year: int, month: int, months: int) -> Tuple[int, int]:
    """Shift a (year, month) pair by a number of months, rolling the year as needed"""
    month_index = month - 1 + months
    return year + month_index // 12, month_index % 12 + 1


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def compose_date(
    year: int,
    month: int,
    day: int,
    policy: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER,
) -> date:
    """
    Build a date from parts, resolving days past the end of the month.

    ROLLOVER counts forward from the first of the month, so surplus days
    land in the following month (30 February 2025 -> 2 March 2025).
    CLAMP pins to the month's last day.
    """
    if policy == DayOverflowPolicy.CLAMP:
        return date(year, month, min(day, days_in_month(year, month)))
    return date(year, month, 1) + timedelta(days=day - 1)


def as_date(value: Union[date, datetime]) -> date:
    """Calendar date of a date or datetime"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until(target: date, start: Union[date, datetime]) -> int:
    """
    Whole days from start to the beginning of target, rounding up.

    A datetime start with a time of day leaves a fractional day, which
    counts as a full one. The result is negative when target is earlier.
    """
    if isinstance(start, datetime):
        target_start = datetime.combine(target, time.min, tzinfo=start.tzinfo)
        return math.ceil((target_start - start).total_seconds() / SECONDS_PER_DAY)
    return (target - start).days
