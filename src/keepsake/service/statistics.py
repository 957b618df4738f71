# SPDX-License-Identifier: MIT

"""
Derived numbers over record snapshots.

Everything here is a pure function of its inputs and is recomputed on every
call; nothing is cached between calls.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar, cast

import pendulum

from keepsake.query.sort import sort_items
from keepsake.query.util import get_property
from keepsake.time import DateWindow, datetime_to_local_date_str, in_window

T = TypeVar("T", bound=Mapping[str, Any])


def count_by(items: Sequence[T], property: str) -> dict[str, int]:
    """
    Count items per value of a property, in order of first appearance.

    Items without a value for the property are not counted.
    """
    counts: dict[str, int] = {}
    for item in items:
        value = get_property(item, property)
        if value is None:
            continue
        key = str(value)
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_in_window(
    items: Sequence[T],
    property: str,
    window: DateWindow,
    now: Optional[pendulum.DateTime] = None,
) -> int:
    return len(
        [
            item
            for item in items
            if in_window(
                cast(Optional[pendulum.DateTime], get_property(item, property)),
                window,
                now,
            )
        ]
    )


def percentage(part: int, total: int) -> int:
    """
    Whole-number percentage with halves rounded up; 0 when there is nothing
    to divide by.
    """
    if total == 0:
        return 0
    return int(part * 100 / total + 0.5)


def average(values: Iterable[Optional[float]]) -> Optional[float]:
    present = [value for value in values if value is not None]
    if len(present) == 0:
        return None
    return sum(present) / len(present)


def goal_progress(current: int, target: int) -> float:
    """Fraction of a goal reached, clamped to [0, 1]."""
    if target <= 0:
        return 0.0
    return min(max(current / target, 0.0), 1.0)


def busiest_day(items: Sequence[T], property: str) -> Optional[tuple[str, int]]:
    """
    Find the local date with the most items.

    Returns:
        Tuple of (local date as YYYY-MM-DD, count), or None when no item has
        the property. Ties go to the earliest date.
    """
    per_day: dict[str, int] = {}
    for item in items:
        value = cast(Optional[pendulum.DateTime], get_property(item, property))
        if value is None:
            continue
        day = datetime_to_local_date_str(value)
        per_day[day] = per_day.get(day, 0) + 1

    if len(per_day) == 0:
        return None

    best_day = min(per_day, key=lambda day: (-per_day[day], day))
    return best_day, per_day[best_day]


def longest_text(items: Sequence[T], property: str) -> Optional[T]:
    longest: Optional[T] = None
    longest_length = 0
    for item in items:
        value = get_property(item, property)
        if value is None:
            continue
        # strict comparison keeps the first item on ties
        if longest is None or len(str(value)) > longest_length:
            longest = item
            longest_length = len(str(value))
    return longest


def most_recent(items: Sequence[T], property: str, limit: int = 5) -> list[T]:
    return sort_items(items, [f"desc {property}"])[:limit]
