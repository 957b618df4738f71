# SPDX-License-Identifier: MIT

"""Per invocation application state."""

from contextvars import ContextVar

# Listings hand out short ids from 1 again while this is on
_renumber_short_ids: ContextVar[bool] = ContextVar("renumber_short_ids", default=True)


def set_renumber_short_ids(renumber: bool) -> None:
    _renumber_short_ids.set(renumber)


def renumber_short_ids() -> bool:
    return _renumber_short_ids.get()
