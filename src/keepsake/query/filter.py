# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, TypeVar, cast

import pendulum

from keepsake.model.filter import (
    BooleanFilter,
    Filter,
    Filters,
    MultiPropertyFilter,
    PropertyFilter,
    PropertyNameFilter,
    SingleBooleanFilter,
    ValueFilter,
)
from keepsake.query.filter_type import FilterType
from keepsake.query.util import get_property, split_instruction
from keepsake.time import DateWindow, in_window, now_utc

T = TypeVar("T", bound=Mapping[str, Any])


def generate_filter(
    filter: Filters, now: Optional[pendulum.DateTime] = None
) -> "Predicate":
    filter_obj = filter_factory(filter, now)
    if isinstance(filter_obj, And | Or):
        for child_filter_bool in cast(BooleanFilter, filter)["predicates"]:
            filter_obj.add_predicate(generate_filter(child_filter_bool, now))
    elif isinstance(filter_obj, Not):
        child_filter_single_bool = cast(SingleBooleanFilter, filter)["predicate"]
        filter_obj.set_predicate(generate_filter(child_filter_single_bool, now))
    return filter_obj


def filter_factory(
    filter: Filter, now: Optional[pendulum.DateTime] = None
) -> "Predicate":
    match filter["filter_type"]:
        case FilterType.AND:
            return And()
        case FilterType.OR:
            return Or()
        case FilterType.NOT:
            return Not()
        case FilterType.EMPTY:
            return Empty(cast(PropertyNameFilter, filter))
        case FilterType.STR:
            return Str(cast(PropertyFilter, filter))
        case FilterType.SEARCH:
            return Search(cast(MultiPropertyFilter, filter))
        case FilterType.NUM:
            return Num(cast(PropertyFilter, filter))
        case FilterType.DATE:
            return Date(cast(PropertyFilter, filter), now)
        case FilterType.TAG:
            return Tag(cast(ValueFilter, filter))
    raise ValueError(f"unknown filter type: {filter['filter_type']}")


def apply_filters(
    items: Sequence[T],
    filters: Sequence[Filters],
    now: Optional[pendulum.DateTime] = None,
) -> list[T]:
    """Apply several filters with AND semantics, keeping the input order."""
    if len(filters) == 0:
        return list(items)
    conjunction: BooleanFilter = {
        "filter_type": FilterType.AND,
        "predicates": list(filters),
    }
    return generate_filter(conjunction, now).filter(items)


class Predicate(ABC):
    @abstractmethod
    def matches(self, item: Mapping[str, Any]) -> bool: ...

    def filter(self, items: Sequence[T]) -> list[T]:
        return [item for item in items if self.matches(item)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, item: Mapping[str, Any]) -> bool:
        return all(predicate.matches(item) for predicate in self.predicates)


class Or(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, item: Mapping[str, Any]) -> bool:
        return any(predicate.matches(item) for predicate in self.predicates)


class Not(Predicate):
    def __init__(self) -> None:
        self.predicate: Optional[Predicate] = None

    def set_predicate(self, predicate: Predicate) -> None:
        self.predicate = predicate

    def matches(self, item: Mapping[str, Any]) -> bool:
        if self.predicate is None:
            raise ValueError("NOT predicate cannot be None")
        return not self.predicate.matches(item)


class Empty(Predicate):
    def __init__(self, property_filter: PropertyNameFilter) -> None:
        self.property_filter = property_filter

    def matches(self, item: Mapping[str, Any]) -> bool:
        return get_property(item, self.property_filter["property"]) is None


class Str(Predicate):
    def __init__(self, property_filter: PropertyFilter) -> None:
        self.property_filter = property_filter
        self.instruction, self.value = split_instruction(property_filter["filter"])

    def matches(self, item: Mapping[str, Any]) -> bool:
        property_value = get_property(item, self.property_filter["property"])
        if property_value is None:
            return False

        match self.instruction:
            case "equals":
                return str(property_value) == self.value
            case "equals_no_case":
                return str(property_value).lower() == self.value.lower()
            case "contains":
                return self.value in str(property_value)
            case "contains_no_case":
                return self.value.lower() in str(property_value).lower()
        raise ValueError(f"unknown str instruction: {self.instruction}")


class Search(Predicate):
    """Case-insensitive substring search across several properties."""

    def __init__(self, search_filter: MultiPropertyFilter) -> None:
        self.search_filter = search_filter
        self.query = search_filter["filter"].strip().lower()

    def matches(self, item: Mapping[str, Any]) -> bool:
        if self.query == "":
            return True
        for property in self.search_filter["properties"]:
            property_value = get_property(item, property)
            if property_value is None:
                continue
            if isinstance(property_value, list):
                if any(self.query in str(value).lower() for value in property_value):
                    return True
            elif self.query in str(property_value).lower():
                return True
        return False


class Num(Predicate):
    def __init__(self, property_filter: PropertyFilter) -> None:
        self.property_filter = property_filter
        self.instruction, value = split_instruction(property_filter["filter"])
        self.values = [float(part) for part in value.split()]

    def matches(self, item: Mapping[str, Any]) -> bool:
        if self.instruction == "all":
            return True

        property_value = get_property(item, self.property_filter["property"])
        if property_value is None or isinstance(property_value, bool):
            return False
        number = float(property_value)

        match self.instruction:
            case "eq":
                return number == self.values[0]
            case "gt":
                return number > self.values[0]
            case "gte":
                return number >= self.values[0]
            case "lt":
                return number < self.values[0]
            case "lte":
                return number <= self.values[0]
            case "between":
                # inclusive lower bound, exclusive upper bound
                return self.values[0] <= number < self.values[1]
        raise ValueError(f"unknown num instruction: {self.instruction}")


class Date(Predicate):
    def __init__(
        self, property_filter: PropertyFilter, now: Optional[pendulum.DateTime] = None
    ) -> None:
        self.property_filter = property_filter
        self.instruction, self.value = split_instruction(property_filter["filter"])
        self.now = now if now is not None else now_utc()

    def matches(self, item: Mapping[str, Any]) -> bool:
        property_value = cast(
            Optional[pendulum.DateTime],
            get_property(item, self.property_filter["property"]),
        )

        if self.instruction == "in":
            return in_window(property_value, DateWindow(self.value), self.now)

        if property_value is None:
            return False

        reference_date = self.__reference_date()
        match self.instruction:
            case "on":
                end_reference_date = reference_date.add(days=1)
                return reference_date <= property_value < end_reference_date
            case "before":
                return property_value < reference_date
            case "after":
                return property_value >= reference_date.add(days=1)
        raise ValueError(f"unknown date instruction: {self.instruction}")

    def __reference_date(self) -> pendulum.DateTime:
        today = self.now.in_tz("local").start_of("day")
        match self.value:
            case "today":
                return today
            case "yesterday":
                return today.subtract(days=1)
            case "tomorrow":
                return today.add(days=1)
        return cast(pendulum.DateTime, pendulum.parse(self.value, tz="local")).start_of(
            "day"
        )


class Tag(Predicate):
    def __init__(self, tag_filter: ValueFilter) -> None:
        self.tag_filter = tag_filter

    def matches(self, item: Mapping[str, Any]) -> bool:
        tags = get_property(item, "tags")
        if tags is None:
            return False
        return self.tag_filter["filter"] in tags
