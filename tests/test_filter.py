# SPDX-License-Identifier: MIT

from typing import Any

import pendulum
import pytest

from keepsake.model.filter import Filters
from keepsake.query.filter import apply_filters, generate_filter
from keepsake.query.filter_type import FilterType


@pytest.fixture
def items(now: pendulum.DateTime) -> list[dict[str, Any]]:
    return [
        {
            "title": "Dune",
            "tags": ["sci-fi", "classic"],
            "state": {"status": "completed", "rating": 9, "completed": now},
        },
        {
            "title": "Emma",
            "tags": None,
            "state": {
                "status": "completed",
                "rating": 4,
                "completed": now.subtract(years=1),
            },
        },
        {
            "title": "Ulysses",
            "tags": ["classic"],
            "state": {"status": "want_to_read"},
        },
    ]


def titles(items: list[dict[str, Any]]) -> list[str]:
    return [item["title"] for item in items]


def num(property: str, filter: str) -> Filters:
    return {"filter_type": FilterType.NUM, "property": property, "filter": filter}


def date(property: str, filter: str) -> Filters:
    return {"filter_type": FilterType.DATE, "property": property, "filter": filter}


def test_and_composition_is_order_independent(
    items: list[dict[str, Any]], now: pendulum.DateTime
) -> None:
    rating = num("state.rating", "gte 8")
    this_month = date("state.completed", "in this_month")

    assert titles(apply_filters(items, [rating, this_month], now)) == ["Dune"]
    assert titles(apply_filters(items, [this_month, rating], now)) == ["Dune"]


def test_no_filters_keeps_everything(items: list[dict[str, Any]]) -> None:
    assert titles(apply_filters(items, [])) == ["Dune", "Emma", "Ulysses"]


def test_empty_collection_gives_empty_list() -> None:
    assert apply_filters([], [num("state.rating", "gte 8")]) == []


def test_absent_field_is_excluded_by_num(items: list[dict[str, Any]]) -> None:
    assert titles(apply_filters(items, [num("state.rating", "lt 5")])) == ["Emma"]
    assert titles(apply_filters(items, [num("state.rating", "gte 0")])) == [
        "Dune",
        "Emma",
    ]


def test_num_all_passes_absent_field(items: list[dict[str, Any]]) -> None:
    assert titles(apply_filters(items, [num("state.rating", "all")])) == [
        "Dune",
        "Emma",
        "Ulysses",
    ]


def test_num_between_excludes_upper_bound() -> None:
    ratings = [{"title": str(rating), "rating": rating} for rating in (4, 5, 7, 8)]

    assert titles(apply_filters(ratings, [num("rating", "between 5 8")])) == ["5", "7"]


def test_date_windows(items: list[dict[str, Any]], now: pendulum.DateTime) -> None:
    assert titles(
        apply_filters(items, [date("state.completed", "in this_year")], now)
    ) == ["Dune"]
    assert titles(
        apply_filters(items, [date("state.completed", "in last_year")], now)
    ) == ["Emma"]
    assert titles(apply_filters(items, [date("state.completed", "in all")], now)) == [
        "Dune",
        "Emma",
        "Ulysses",
    ]


def test_date_on_before_after(
    items: list[dict[str, Any]], now: pendulum.DateTime
) -> None:
    assert titles(apply_filters(items, [date("state.completed", "on today")], now)) == [
        "Dune"
    ]
    assert titles(
        apply_filters(items, [date("state.completed", "on 2026-06-15")], now)
    ) == ["Dune"]
    assert titles(
        apply_filters(items, [date("state.completed", "before today")], now)
    ) == ["Emma"]
    assert titles(
        apply_filters(items, [date("state.completed", "after yesterday")], now)
    ) == ["Dune"]


def test_str_filters(items: list[dict[str, Any]]) -> None:
    equals: Filters = {
        "filter_type": FilterType.STR,
        "property": "state.status",
        "filter": "equals want_to_read",
    }
    contains: Filters = {
        "filter_type": FilterType.STR,
        "property": "title",
        "filter": "contains_no_case MM",
    }

    assert titles(apply_filters(items, [equals])) == ["Ulysses"]
    assert titles(apply_filters(items, [contains])) == ["Emma"]


def test_search_over_several_properties(items: list[dict[str, Any]]) -> None:
    search: Filters = {
        "filter_type": FilterType.SEARCH,
        "properties": ["title", "tags"],
        "filter": "CLASS",
    }
    everything: Filters = {
        "filter_type": FilterType.SEARCH,
        "properties": ["title"],
        "filter": "  ",
    }

    assert titles(apply_filters(items, [search])) == ["Dune", "Ulysses"]
    assert len(apply_filters(items, [everything])) == 3


def test_or_not_empty_and_tag(items: list[dict[str, Any]]) -> None:
    either: Filters = {
        "filter_type": FilterType.OR,
        "predicates": [
            {"filter_type": FilterType.TAG, "filter": "sci-fi"},
            {"filter_type": FilterType.EMPTY, "property": "tags"},
        ],
    }
    neither: Filters = {"filter_type": FilterType.NOT, "predicate": either}

    assert titles(generate_filter(either).filter(items)) == ["Dune", "Emma"]
    assert titles(generate_filter(neither).filter(items)) == ["Ulysses"]


def test_unknown_filter_type_raises() -> None:
    with pytest.raises(ValueError):
        generate_filter({"filter_type": "bogus"})  # type: ignore[typeddict-item]
