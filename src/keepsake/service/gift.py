# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from keepsake.model.filter import Filters
from keepsake.model.gift import GIFT_STATUSES, Gift, GiftStatus
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.service.statistics import count_by, percentage


class GiftStatistics(TypedDict):
    total: int
    planned: int
    purchased: int
    given: int
    given_percentage: int
    per_person: dict[str, int]
    total_budget: float
    open_budget: float


def filter_gifts(
    gifts: list[Gift],
    status: Optional[GiftStatus] = None,
    person: Optional[str] = None,
    query: Optional[str] = None,
) -> list[Gift]:
    filters: list[Filters] = []
    if status is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "state.status",
                "filter": f"equals {status}",
            }
        )
    if person is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "person",
                "filter": f"equals_no_case {person}",
            }
        )
    if query is not None:
        filters.append(
            {
                "filter_type": FilterType.SEARCH,
                "properties": ["title", "person", "category", "note"],
                "filter": query,
            }
        )
    return apply_filters(gifts, filters)


def gift_statistics(gifts: list[Gift]) -> GiftStatistics:
    """
    Count gifts per status and person and add up budgets.

    The open budget only covers gifts that are still planned.
    """
    per_status = {
        status: len([gift for gift in gifts if gift["state"]["status"] == status])
        for status in GIFT_STATUSES
    }
    return {
        "total": len(gifts),
        "planned": per_status["planned"],
        "purchased": per_status["purchased"],
        "given": per_status["given"],
        "given_percentage": percentage(per_status["given"], len(gifts)),
        "per_person": count_by(gifts, "person"),
        "total_budget": sum(
            gift["budget"] for gift in gifts if gift["budget"] is not None
        ),
        "open_budget": sum(
            gift["budget"]
            for gift in gifts
            if gift["budget"] is not None and gift["state"]["status"] == "planned"
        ),
    }
