# SPDX-License-Identifier: MIT

from typing import Any, Mapping


def split_instruction(filter: str) -> tuple[str, str]:
    instruction_value = filter.strip()
    instruction_value_list = instruction_value.split(" ")
    instruction = instruction_value_list[0].strip()
    value = instruction_value[len(instruction) :].strip()

    return instruction, value


def get_property(item: Mapping[str, Any], property: str) -> Any:
    """
    Resolve a dotted property path such as "state.rating".

    Returns None when any step of the path is absent, so an absent optional
    field and an explicit None look the same to filters and sorts.
    """
    value: Any = item
    for part in property.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value
