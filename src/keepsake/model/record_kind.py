# SPDX-License-Identifier: MIT

from enum import StrEnum


class RecordKind(StrEnum):
    BOOK = "book"
    PHRASE = "phrase"
    IDEA = "idea"
    GIFT = "gift"
    RECIPE = "recipe"
    NOTE = "note"

    @property
    def collection_key(self) -> str:
        """Key of the persisted collection, e.g. "books"."""
        return f"{self.value}s"
