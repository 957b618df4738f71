# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from keepsake.model.filter import Filters
from keepsake.model.phrase import DailyState, Phrase, PhraseStatus
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.query.sort import sort_items
from keepsake.service.statistics import percentage


class PhraseStatistics(TypedDict):
    total: int
    active: int
    archived: int
    custom: int
    built_in: int
    archived_percentage: int
    practice_completed: bool
    light_off: bool


def filter_phrases(
    phrases: list[Phrase],
    status: Optional[PhraseStatus] = None,
    query: Optional[str] = None,
) -> list[Phrase]:
    filters: list[Filters] = []
    if status is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "state.status",
                "filter": f"equals {status}",
            }
        )
    if query is not None:
        filters.append(
            {"filter_type": FilterType.SEARCH, "properties": ["text"], "filter": query}
        )
    return apply_filters(phrases, filters)


def search_archive(phrases: list[Phrase], query: str = "") -> list[Phrase]:
    """Archived phrases containing the query, most recently archived first."""
    return sort_items(
        filter_phrases(phrases, "archived", query), ["desc state.archived"]
    )


def current_phrase(
    phrases: list[Phrase], daily_state: DailyState
) -> Optional[Phrase]:
    for phrase in phrases:
        if phrase["id"] == daily_state["current_phrase_id"]:
            return phrase
    return None


def phrase_statistics(
    phrases: list[Phrase], daily_state: DailyState
) -> PhraseStatistics:
    archived = len(
        [phrase for phrase in phrases if phrase["state"]["status"] == "archived"]
    )
    custom = len([phrase for phrase in phrases if phrase["custom"]])
    return {
        "total": len(phrases),
        "active": len(phrases) - archived,
        "archived": archived,
        "custom": custom,
        "built_in": len(phrases) - custom,
        "archived_percentage": percentage(archived, len(phrases)),
        "practice_completed": daily_state["completed"],
        "light_off": daily_state["light_off"],
    }
