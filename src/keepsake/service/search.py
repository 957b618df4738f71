# SPDX-License-Identifier: MIT

from typing import Any, Mapping, Optional, Sequence, TypedDict

from keepsake.model.book import Book
from keepsake.model.entity_id import EntityId
from keepsake.model.gift import Gift
from keepsake.model.idea import Idea
from keepsake.model.note import Note
from keepsake.model.phrase import Phrase
from keepsake.model.recipe import Recipe
from keepsake.model.record_kind import RecordKind
from keepsake.query.filter import generate_filter
from keepsake.query.filter_type import FilterType
from keepsake.query.util import get_property


class SearchResult(TypedDict):
    """Represents a unified search result across all record kinds."""

    id: Optional[EntityId]
    kind: RecordKind
    title: str
    detail: Optional[str]


# (searched properties, title property, detail property) per record kind
SEARCH_PROPERTIES: dict[RecordKind, tuple[list[str], str, Optional[str]]] = {
    RecordKind.BOOK: (["title", "author", "notes"], "title", "author"),
    RecordKind.PHRASE: (["text"], "text", None),
    RecordKind.IDEA: (
        ["title", "description", "state.memory", "category"],
        "title",
        "state.memory",
    ),
    RecordKind.GIFT: (["title", "person", "category", "note"], "title", "person"),
    RecordKind.RECIPE: (
        ["title", "ingredients", "instructions"],
        "title",
        "category",
    ),
    RecordKind.NOTE: (["title", "text", "tags"], "title", "text"),
}


def __search_kind(
    query: str, kind: RecordKind, records: Sequence[Mapping[str, Any]]
) -> list[SearchResult]:
    properties, title_property, detail_property = SEARCH_PROPERTIES[kind]
    predicate = generate_filter(
        {"filter_type": FilterType.SEARCH, "properties": properties, "filter": query}
    )
    results: list[SearchResult] = []
    for record in predicate.filter(records):
        detail = (
            get_property(record, detail_property)
            if detail_property is not None
            else None
        )
        results.append(
            {
                "id": record["id"],
                "kind": kind,
                "title": str(get_property(record, title_property)),
                "detail": str(detail) if detail is not None else None,
            }
        )
    return results


def search_records(
    query: str,
    books: Optional[list[Book]] = None,
    phrases: Optional[list[Phrase]] = None,
    ideas: Optional[list[Idea]] = None,
    gifts: Optional[list[Gift]] = None,
    recipes: Optional[list[Recipe]] = None,
    notes: Optional[list[Note]] = None,
) -> list[SearchResult]:
    """
    Search across every record kind with a case-insensitive substring match.

    Args:
        query: The search query string
        books: Books to search
        phrases: Phrases to search
        ideas: Ideas to search
        gifts: Gifts to search
        recipes: Recipes to search
        notes: Notes to search

    Returns:
        List of SearchResult objects, grouped by kind in the order above
    """
    results: list[SearchResult] = []
    for kind, records in (
        (RecordKind.BOOK, books),
        (RecordKind.PHRASE, phrases),
        (RecordKind.IDEA, ideas),
        (RecordKind.GIFT, gifts),
        (RecordKind.RECIPE, recipes),
        (RecordKind.NOTE, notes),
    ):
        if records is not None:
            results.extend(__search_kind(query, kind, records))
    return results
