# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Mapping, Sequence, TypeVar

from keepsake.query.util import get_property

T = TypeVar("T", bound=Mapping[str, Any])


def sort_items(items: Sequence[T], sort_instructions: Sequence[str]) -> list[T]:
    """
    Sort items by one or more instructions without touching the input.

    Each instruction is a property path, optionally prefixed with "desc "
    (or "asc "). The first instruction is the primary key. Strings compare
    case-insensitively, None values always go last, and ties keep their input
    order because list.sort is stable.
    """
    sorted_items = deepcopy(list(items))

    for sort_instruction in reversed(sort_instructions):
        descending = False
        column = sort_instruction
        if " " in sort_instruction:
            direction, column = sort_instruction.split(" ", 1)
            if direction == "desc":
                descending = True
        none_items = [
            item for item in sorted_items if get_property(item, column) is None
        ]
        value_items = [
            item for item in sorted_items if get_property(item, column) is not None
        ]
        value_items.sort(key=lambda item: __sort_key(item, column), reverse=descending)
        sorted_items = value_items + none_items

    return sorted_items


def __sort_key(item: Mapping[str, Any], column: str) -> Any:
    value = get_property(item, column)
    if isinstance(value, str):
        return value.casefold()
    return value
