# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import pendulum


class PostFrontMatter(TypedDict):
    title: NotRequired[Optional[str]]
    date: pendulum.Date
    draft: bool


class PostRecord(TypedDict):
    path: Path
    date: pendulum.Date
    is_draft: bool
    matches_filter: bool
