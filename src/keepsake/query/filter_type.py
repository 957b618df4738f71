# SPDX-License-Identifier: MIT

from enum import StrEnum


class FilterType(StrEnum):
    AND = "and"
    OR = "or"
    NOT = "not"
    EMPTY = "empty"
    STR = "str"
    SEARCH = "search"
    NUM = "num"
    DATE = "date"
    TAG = "tag"
