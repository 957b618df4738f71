# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from keepsake.model.filter import Filters
from keepsake.model.note import Note
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.query.sort import sort_items
from keepsake.service.statistics import longest_text


class NoteStatistics(TypedDict):
    total: int
    pinned: int
    tag_counts: dict[str, int]
    longest: Optional[Note]


def filter_notes(
    notes: list[Note],
    tag: Optional[str] = None,
    query: Optional[str] = None,
    pinned_only: bool = False,
) -> list[Note]:
    filters: list[Filters] = []
    if tag is not None:
        filters.append({"filter_type": FilterType.TAG, "filter": tag})
    if query is not None:
        filters.append(
            {
                "filter_type": FilterType.SEARCH,
                "properties": ["title", "text", "tags"],
                "filter": query,
            }
        )
    if pinned_only:
        filters.append(
            {"filter_type": FilterType.STR, "property": "pinned", "filter": "equals True"}
        )
    return apply_filters(notes, filters)


def sort_notes(notes: list[Note]) -> list[Note]:
    """Pinned notes first, then the most recently updated."""
    return sort_items(notes, ["desc pinned", "desc updated"])


def note_statistics(notes: list[Note]) -> NoteStatistics:
    tag_counts: dict[str, int] = {}
    for note in notes:
        for tag in note["tags"] or []:
            tag_counts[tag] = tag_counts.get(tag, 0) + 1
    return {
        "total": len(notes),
        "pinned": len([note for note in notes if note["pinned"]]),
        "tag_counts": dict(sorted(tag_counts.items())),
        "longest": longest_text(notes, "text"),
    }
