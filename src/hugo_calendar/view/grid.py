# SPDX-License-Identifier: MIT

import math

import pendulum

from hugo_calendar.model.calendar import Cell, DateIndex, Grid, Month

DAYS_PER_WEEK = 7


def start_weekday(month: Month) -> int:
    """Weekday of the first of the month with Sunday as 0 and Saturday as 6."""
    return pendulum.date(month.year, month.month, 1).isoweekday() % DAYS_PER_WEEK


def days_in_month(month: Month) -> int:
    return pendulum.date(month.year, month.month, 1).days_in_month


def expected_row_count(month: Month) -> int:
    return math.ceil((start_weekday(month) + days_in_month(month)) / DAYS_PER_WEEK)


def padding_cell() -> Cell:
    return {
        "date": None,
        "count": 0,
        "has_activity": False,
        "is_today": False,
        "is_padding": True,
    }


def day_cell(date: pendulum.Date, date_index: DateIndex, today: pendulum.Date) -> Cell:
    count = date_index.get(date, 0)
    return {
        "date": date,
        "count": count,
        "has_activity": count > 0,
        "is_today": date == today,
        "is_padding": False,
    }


def build_month_grid(month: Month, date_index: DateIndex, today: pendulum.Date) -> Grid:
    """
    Lay out one month as weeks of seven cells, Sunday first.

    The first week is padded up to the weekday of the 1st and the last week is
    padded after the final day, so every row has exactly seven cells.

    Args:
        month: The month to build
        date_index: Post counts per date
        today: The current local date, marked on its cell

    Returns:
        The rows of the month grid, never empty
    """
    first_weekday = start_weekday(month)
    last_day = days_in_month(month)

    grid: Grid = []
    day = 1

    while day <= last_day or len(grid) == 0:
        row: list[Cell] = []

        for column in range(DAYS_PER_WEEK):
            if len(grid) == 0 and column < first_weekday:
                row.append(padding_cell())
            elif day <= last_day:
                date = pendulum.date(month.year, month.month, day)
                row.append(day_cell(date, date_index, today))
                day += 1
            else:
                row.append(padding_cell())

        grid.append(row)

    return grid
