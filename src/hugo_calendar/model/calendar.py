# SPDX-License-Identifier: MIT

from collections.abc import Mapping
from enum import Enum
from typing import Optional, TypeAlias, TypedDict

import pendulum

# First day of the month, day component is always 1
Month: TypeAlias = pendulum.Date

DateIndex: TypeAlias = Mapping[pendulum.Date, int]


class CellState(Enum):
    TODAY = "today"
    ACTIVE = "active"
    NEUTRAL = "neutral"
    PADDING = "padding"


class Cell(TypedDict):
    date: Optional[pendulum.Date]
    count: int
    has_activity: bool
    is_today: bool
    is_padding: bool


Grid: TypeAlias = list[list[Cell]]

# A run of text plus the state of the cell it belongs to, None for headers
Segment: TypeAlias = tuple[str, Optional[CellState]]
Line: TypeAlias = list[Segment]
