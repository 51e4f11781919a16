# SPDX-License-Identifier: MIT

from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional

import pendulum

from hugo_calendar.model.calendar import DateIndex
from hugo_calendar.model.post import PostRecord


def is_countable(record: PostRecord, filter_text: str = "") -> bool:
    """Drafts never count, and neither do posts matching an active filter."""
    if record["is_draft"]:
        return False
    if filter_text != "" and record["matches_filter"]:
        return False
    return True


def build_date_index(records: Iterable[PostRecord], filter_text: str = "") -> DateIndex:
    """
    Count the countable posts per calendar day.

    Counts only ever increment, so the result does not depend on record order.

    Args:
        records: Post records from the post repository
        filter_text: Configured filter text, empty when filtering is disabled

    Returns:
        A read-only mapping of date to post count. Dates without posts are absent.
    """
    counts: dict[pendulum.Date, int] = {}

    for record in records:
        if not is_countable(record, filter_text):
            continue
        day = record["date"]
        key = pendulum.date(day.year, day.month, day.day)
        counts[key] = counts.get(key, 0) + 1

    return MappingProxyType(counts)


def get_date_bounds(
    date_index: DateIndex,
) -> Optional[tuple[pendulum.Date, pendulum.Date]]:
    """Return the earliest and latest dates in the index, or None if it is empty."""
    if len(date_index) == 0:
        return None
    return min(date_index), max(date_index)
