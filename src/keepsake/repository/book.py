# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from keepsake import configuration, time
from keepsake.model.book import Book, BookStatus
from keepsake.model.entity_id import EntityId
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import (
    LiteralString,
    Persistence,
    YamlFilePersistence,
)
from keepsake.repository.record import RecordRepository
from keepsake.template.book import (
    get_completed_state,
    get_reading_state,
    get_want_to_read_state,
)


class BookRepository(RecordRepository[Book]):
    kind = RecordKind.BOOK

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.BOOK.collection_key, configuration.BOOKS_FILE
            )
        )

    def _convert_for_serialization(self, record: Book) -> dict[str, Any]:
        serializable_book = super()._convert_for_serialization(record)
        state = serializable_book["state"]
        if state["status"] == "reading":
            state["started"] = time.datetime_to_iso_str(state["started"])
        elif state["status"] == "completed":
            state["completed"] = time.datetime_to_iso_str(state["completed"])
        if serializable_book["notes"] is not None:
            serializable_book["notes"] = LiteralString(serializable_book["notes"])
        return serializable_book

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Book:
        deserializable_book = super()._convert_for_deserialization(record)
        state = cast(dict[str, Any], deserializable_book["state"])
        if state["status"] == "reading":
            state["started"] = time.datetime_from_str(state["started"])
        elif state["status"] == "completed":
            state["completed"] = time.datetime_from_str(state["completed"])
        return deserializable_book

    def get_books_with_status(self, status: BookStatus) -> list[Book]:
        return [
            book for book in self.get_all_records() if book["state"]["status"] == status
        ]

    def start_reading(
        self,
        id: EntityId,
        current_page: Optional[int] = None,
        total_pages: Optional[int] = None,
    ) -> bool:
        return self._replace_state(id, get_reading_state(current_page, total_pages))

    def update_progress(
        self,
        id: EntityId,
        current_page: Optional[int],
        total_pages: Optional[int] = None,
    ) -> bool:
        """
        Record reading progress; only books currently being read have progress.

        Returns False when the book is missing or not in the reading state.
        """
        book = self.get_record(id)
        if book is None or book["state"]["status"] != "reading":
            return False
        book["state"]["current_page"] = current_page
        if total_pages is not None:
            book["state"]["total_pages"] = total_pages
        return self.modify_record(book)

    def complete_book(self, id: EntityId, rating: Optional[int] = None) -> bool:
        return self._replace_state(id, get_completed_state(rating))

    def move_to_wishlist(self, id: EntityId) -> bool:
        return self._replace_state(id, get_want_to_read_state())


BOOK_REPO = BookRepository()
