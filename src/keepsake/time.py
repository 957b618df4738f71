# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, cast

import pendulum


class DateWindow(StrEnum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this_week"
    LAST_7_DAYS = "last_7_days"
    THIS_MONTH = "this_month"
    LAST_30_DAYS = "last_30_days"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"
    ALL = "all"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a user supplied date(time) as local time and convert it to UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return pendulum_date_time.in_tz("UTC")


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_date_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def window_boundaries(
    window: DateWindow, now: Optional[pendulum.DateTime] = None
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    Get the half-open [start, end) boundaries of a date window relative to now.

    Calendar windows are computed in local time so "this month" means the
    user's month, then converted to UTC for comparison with stored values.

    Returns:
        Tuple of (start, end) as UTC DateTimes, or None for DateWindow.ALL
    """
    if window == DateWindow.ALL:
        return None

    local_now = (now if now is not None else now_utc()).in_tz("local")

    match window:
        case DateWindow.TODAY:
            start = local_now.start_of("day")
            end = start.add(days=1)
        case DateWindow.YESTERDAY:
            end = local_now.start_of("day")
            start = end.subtract(days=1)
        case DateWindow.THIS_WEEK:
            start = local_now.start_of("week")
            end = start.add(weeks=1)
        case DateWindow.LAST_7_DAYS:
            start = local_now.subtract(weeks=1)
            end = local_now.add(microseconds=1)
        case DateWindow.THIS_MONTH:
            start = local_now.start_of("month")
            end = start.add(months=1)
        case DateWindow.LAST_30_DAYS:
            start = local_now.subtract(days=30)
            end = local_now.add(microseconds=1)
        case DateWindow.THIS_YEAR:
            start = local_now.start_of("year")
            end = start.add(years=1)
        case DateWindow.LAST_YEAR:
            end = local_now.start_of("year")
            start = end.subtract(years=1)
        case _:
            raise ValueError(f"unknown date window: {window}")

    return start.in_tz("UTC"), end.in_tz("UTC")


def in_window(
    datetime: Optional[pendulum.DateTime],
    window: DateWindow,
    now: Optional[pendulum.DateTime] = None,
) -> bool:
    """
    Check whether a datetime falls in a window.

    A missing datetime only passes the ALL window.
    """
    boundaries = window_boundaries(window, now)
    if boundaries is None:
        return True
    if datetime is None:
        return False
    start, end = boundaries
    return start <= datetime < end
