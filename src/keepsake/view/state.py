# SPDX-License-Identifier: MIT

"""Report rendering switches, set once per invocation."""

from contextvars import ContextVar

# Headers are printed above every report unless turned off
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """Whether reports start with their header line."""
    return _show_header.get()
