# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from keepsake.time import datetime_from_str_utc, now_utc

DAY_OFFSET_PATTERN = re.compile(r"^-?\d+$")


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse a date given on the command line and return it in UTC.

    Accepts YYYY-MM-DD with an optional time, a day offset from today such as
    "3" or "-1", and the words now, today, yesterday and tomorrow.
    """
    if datetime_param is None:
        return None

    value = datetime_param.strip().lower()
    match value:
        case "now":
            return now_utc()
        case "today":
            return pendulum.today("local").in_tz("UTC")
        case "yesterday":
            return pendulum.yesterday("local").in_tz("UTC")
        case "tomorrow":
            return pendulum.tomorrow("local").in_tz("UTC")

    if DAY_OFFSET_PATTERN.match(value):
        return pendulum.today("local").add(days=int(value)).in_tz("UTC")

    try:
        return datetime_from_str_utc(value)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{datetime_param}': {e}")


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse short ids given as "3", "1,4" or with ranges such as "2-5,8".

    Returns the ids sorted, without duplicates.
    """
    ids: set[int] = set()
    for part in (part.strip() for part in id_param.split(",")):
        if part == "":
            continue
        start, separator, end = part.partition("-")
        try:
            first = int(start)
            last = int(end) if separator else first
        except ValueError:
            raise typer.BadParameter(f"'{part}' is not a short id or a range of them")
        if first > last:
            raise typer.BadParameter(f"Range '{part}' runs backwards")
        ids.update(range(first, last + 1))

    if len(ids) == 0:
        raise typer.BadParameter("No ids given")
    return sorted(ids)
