# SPDX-License-Identifier: MIT

import random
from typing import Optional, TypedDict

import pendulum

from keepsake.model.filter import Filters
from keepsake.model.idea import Idea, IdeaCategory, IdeaStatus
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.query.sort import sort_items
from keepsake.service.statistics import (
    busiest_day,
    count_by,
    count_in_window,
    longest_text,
    percentage,
)
from keepsake.time import DateWindow, now_utc


class IdeaStatistics(TypedDict):
    total: int
    planned: int
    completed: int
    completed_percentage: int
    completed_this_month: int
    per_category: dict[str, int]
    busiest_day: Optional[tuple[str, int]]
    longest_memory: Optional[Idea]
    upcoming: int


def idea_search_filter(query: str) -> Filters:
    return {
        "filter_type": FilterType.SEARCH,
        "properties": ["title", "description", "state.memory", "category"],
        "filter": query,
    }


def filter_ideas(
    ideas: list[Idea],
    status: Optional[IdeaStatus] = None,
    category: Optional[IdeaCategory] = None,
    query: Optional[str] = None,
    window: DateWindow = DateWindow.ALL,
    now: Optional[pendulum.DateTime] = None,
) -> list[Idea]:
    """
    Filter ideas; a window other than "all" applies to the completion date.
    """
    filters: list[Filters] = []
    if status is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "state.status",
                "filter": f"equals {status}",
            }
        )
    if category is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "category",
                "filter": f"equals {category.value}",
            }
        )
    if query is not None:
        filters.append(idea_search_filter(query))
    if window != DateWindow.ALL:
        filters.append(
            {
                "filter_type": FilterType.DATE,
                "property": "state.completed",
                "filter": f"in {window.value}",
            }
        )
    return apply_filters(ideas, filters, now)


def memories(
    ideas: list[Idea],
    query: Optional[str] = None,
    window: DateWindow = DateWindow.ALL,
    now: Optional[pendulum.DateTime] = None,
) -> list[Idea]:
    """Completed ideas, most recently completed first."""
    return sort_items(
        filter_ideas(ideas, "completed", query=query, window=window, now=now),
        ["desc state.completed"],
    )


def ideas_for_date(
    ideas: list[Idea], date: str, now: Optional[pendulum.DateTime] = None
) -> list[Idea]:
    """Ideas scheduled on a local date ("today", "tomorrow" or YYYY-MM-DD)."""
    return sort_items(
        apply_filters(
            ideas,
            [
                {
                    "filter_type": FilterType.DATE,
                    "property": "scheduled",
                    "filter": f"on {date}",
                }
            ],
            now,
        ),
        ["scheduled"],
    )


def upcoming_ideas(
    ideas: list[Idea],
    limit: Optional[int] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[Idea]:
    """Planned ideas scheduled from today on, soonest first."""
    start_of_today = (now if now is not None else now_utc()).in_tz("local").start_of(
        "day"
    )
    upcoming = sort_items(
        [
            idea
            for idea in ideas
            if idea["state"]["status"] == "planned"
            and idea["scheduled"] is not None
            and idea["scheduled"] >= start_of_today
        ],
        ["scheduled"],
    )
    if limit is not None:
        return upcoming[:limit]
    return upcoming


def random_idea(
    ideas: list[Idea],
    category: Optional[IdeaCategory] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Idea]:
    candidates = filter_ideas(ideas, "planned", category)
    if len(candidates) == 0:
        return None
    return (rng or random.Random()).choice(candidates)


def idea_statistics(
    ideas: list[Idea], now: Optional[pendulum.DateTime] = None
) -> IdeaStatistics:
    completed_ideas = [idea for idea in ideas if idea["state"]["status"] == "completed"]
    return {
        "total": len(ideas),
        "planned": len(ideas) - len(completed_ideas),
        "completed": len(completed_ideas),
        "completed_percentage": percentage(len(completed_ideas), len(ideas)),
        "completed_this_month": count_in_window(
            completed_ideas, "state.completed", DateWindow.THIS_MONTH, now
        ),
        "per_category": count_by(ideas, "category"),
        "busiest_day": busiest_day(completed_ideas, "state.completed"),
        "longest_memory": longest_text(completed_ideas, "state.memory"),
        "upcoming": len(upcoming_ideas(ideas, now=now)),
    }
