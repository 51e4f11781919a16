# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.text import Text

from hugo_calendar.configuration import Configuration
from hugo_calendar.model.calendar import CellState, DateIndex, Line, Month
from hugo_calendar.service.month_range import get_month_range
from hugo_calendar.view.cell import get_state_styles
from hugo_calendar.view.grid import build_month_grid
from hugo_calendar.view.layout import layout_rows


def render_calendar(
    date_index: DateIndex,
    today: pendulum.Date,
    available_width: int,
    show_counts: bool = False,
    month: Optional[Month] = None,
) -> list[Line]:
    """
    Build the calendar output lines for a date index.

    Args:
        date_index: Post counts per date
        today: The current local date
        available_width: Display width in columns
        show_counts: Print post counts instead of day numbers
        month: A single month to show instead of the span of the index

    Returns:
        The output lines, or an empty list when there is nothing to show
    """
    months = get_month_range(date_index, month)
    if len(months) == 0:
        return []

    grids = [build_month_grid(current, date_index, today) for current in months]
    return layout_rows(months, grids, available_width, show_counts)


def get_available_width(
    console: Console, fallback_width: int, width: Optional[int] = None
) -> int:
    """An explicit width wins, then the terminal width, then the fallback."""
    if width is not None:
        return width
    if console.is_terminal:
        return console.width
    return fallback_width


def line_to_text(
    line: Line, state_styles: dict[CellState, str], header_style: str = ""
) -> Text:
    text = Text()
    for segment, state in line:
        if state is None:
            text.append(segment, style=header_style if segment.strip() else "")
        else:
            text.append(segment, style=state_styles[state])
    return text


def print_calendar(console: Console, lines: list[Line], config: Configuration) -> None:
    state_styles = get_state_styles(config)
    for line in lines:
        console.print(
            line_to_text(line, state_styles, config["header_style"]),
            soft_wrap=True,
        )


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()
