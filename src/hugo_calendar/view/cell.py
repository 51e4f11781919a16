# SPDX-License-Identifier: MIT

from hugo_calendar.configuration import Configuration
from hugo_calendar.model.calendar import Cell, CellState

CELL_WIDTH = 2
BLANK_CELL = " " * CELL_WIDTH

# Count mode glyphs for days without posts
ZERO_COUNT_GLYPH = " ."
TODAY_ZERO_COUNT_GLYPH = " *"


def cell_state(cell: Cell) -> CellState:
    """Today always wins over activity, never the other way around."""
    if cell["is_padding"]:
        return CellState.PADDING
    if cell["is_today"]:
        return CellState.TODAY
    if cell["has_activity"]:
        return CellState.ACTIVE
    return CellState.NEUTRAL


def cell_text(cell: Cell, show_counts: bool = False) -> str:
    """
    The two character text for a cell.

    Day mode prints the day number. Count mode prints the post count, with
    glyphs for days without posts. Counts of 100 or more overflow the field.
    """
    date = cell["date"]
    if cell["is_padding"] or date is None:
        return BLANK_CELL

    if not show_counts:
        return f"{date.day:{CELL_WIDTH}d}"

    if cell["count"] == 0:
        return TODAY_ZERO_COUNT_GLYPH if cell["is_today"] else ZERO_COUNT_GLYPH
    return f"{cell['count']:{CELL_WIDTH}d}"


def render_cell(cell: Cell, show_counts: bool = False) -> tuple[str, CellState]:
    return cell_text(cell, show_counts), cell_state(cell)


def get_state_styles(config: Configuration) -> dict[CellState, str]:
    """Map each cell state to the rich style configured for it."""
    return {
        CellState.TODAY: config["today_style"],
        CellState.ACTIVE: config["active_style"],
        CellState.NEUTRAL: config["neutral_style"],
        CellState.PADDING: "",
    }
