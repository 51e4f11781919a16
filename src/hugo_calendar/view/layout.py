# SPDX-License-Identifier: MIT

from hugo_calendar.configuration import (
    CALENDAR_CONTENT_WIDTH,
    CALENDAR_SEPARATOR,
    CALENDAR_WIDTH,
)
from hugo_calendar.model.calendar import Cell, Grid, Line, Month
from hugo_calendar.view.cell import render_cell

WEEKDAY_HEADER = "Su Mo Tu We Th Fr Sa"
CELL_SEPARATOR = " "
BLANK_GRID_ROW = " " * CALENDAR_CONTENT_WIDTH


def calendars_per_row(available_width: int) -> int:
    """How many calendars fit side by side, always at least one."""
    return max(1, available_width // CALENDAR_WIDTH)


def month_header(month: Month) -> str:
    return f"{month.format('MMMM YYYY', locale='en'):<{CALENDAR_CONTENT_WIDTH}}"


def render_grid_row(cells: list[Cell], show_counts: bool = False) -> Line:
    line: Line = []
    for column, cell in enumerate(cells):
        if column > 0:
            line.append((CELL_SEPARATOR, None))
        line.append(render_cell(cell, show_counts))
    return line


def _join_blocks(blocks: list[Line]) -> Line:
    line: Line = []
    for index, block in enumerate(blocks):
        if index > 0:
            line.append((CALENDAR_SEPARATOR, None))
        line.extend(block)
    return line


def layout_display_row(
    months: list[Month], grids: list[Grid], show_counts: bool = False
) -> list[Line]:
    """
    Render calendars side by side as one display row.

    Shorter grids are filled with blank rows so every calendar in the display
    row ends on the same line. The display row ends with an empty line.
    """
    lines: list[Line] = [
        _join_blocks([[(month_header(month), None)] for month in months]),
        _join_blocks([[(WEEKDAY_HEADER, None)] for _ in months]),
    ]

    row_count = max(len(grid) for grid in grids)
    for row_index in range(row_count):
        blocks: list[Line] = []
        for grid in grids:
            if row_index < len(grid):
                blocks.append(render_grid_row(grid[row_index], show_counts))
            else:
                blocks.append([(BLANK_GRID_ROW, None)])
        lines.append(_join_blocks(blocks))

    lines.append([])
    return lines


def layout_rows(
    months: list[Month],
    grids: list[Grid],
    available_width: int,
    show_counts: bool = False,
) -> list[Line]:
    """
    Pack month grids into display rows that fit the available width.

    Args:
        months: The months to show, in order
        grids: One grid per month, in the same order
        available_width: Display width in columns
        show_counts: Print post counts instead of day numbers

    Returns:
        Every output line, top to bottom
    """
    if len(months) != len(grids):
        raise ValueError("Each month needs exactly one grid")

    per_row = calendars_per_row(available_width)
    lines: list[Line] = []

    for start in range(0, len(months), per_row):
        lines.extend(
            layout_display_row(
                months[start : start + per_row],
                grids[start : start + per_row],
                show_counts,
            )
        )

    return lines


def line_to_str(line: Line) -> str:
    return "".join(text for text, _ in line)
