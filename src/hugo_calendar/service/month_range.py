# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from hugo_calendar.error import InvalidMonth
from hugo_calendar.model.calendar import DateIndex, Month
from hugo_calendar.service.date_index import get_date_bounds

_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def to_month(year: int, month: int) -> Month:
    if not 1 <= month <= 12:
        raise InvalidMonth(f"Month must be between 1 and 12, got {month}")
    if not 1 <= year <= 9999:
        raise InvalidMonth(f"Year must be between 1 and 9999, got {year}")
    return pendulum.date(year, month, 1)


def parse_month(month_str: str) -> Month:
    """Parse a month in YYYY-MM format, raising InvalidMonth if it is not one."""
    match = _MONTH_PATTERN.match(month_str)
    if match is None:
        raise InvalidMonth(f"Month must be in YYYY-MM format, got {month_str!r}")
    return to_month(int(match.group(1)), int(match.group(2)))


def explicit_month_range(month: Month) -> list[Month]:
    return [to_month(month.year, month.month)]


def span_month_range(date_index: DateIndex) -> list[Month]:
    """
    Every month from the earliest to the latest dated post, inclusive.

    Months without posts between the two ends are included. An empty index
    gives an empty range.
    """
    bounds = get_date_bounds(date_index)
    if bounds is None:
        return []

    first, last = bounds
    current = pendulum.date(first.year, first.month, 1)
    end = pendulum.date(last.year, last.month, 1)

    months: list[Month] = []
    while current <= end:
        months.append(current)
        current = current.add(months=1)

    return months


def get_month_range(
    date_index: DateIndex, month: Optional[Month] = None
) -> list[Month]:
    if month is not None:
        return explicit_month_range(month)
    return span_month_range(date_index)
