# SPDX-License-Identifier: MIT

from typing import Any, Optional

from keepsake import configuration
from keepsake.model.entity_id import EntityId
from keepsake.model.note import Note
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import (
    LiteralString,
    Persistence,
    YamlFilePersistence,
)
from keepsake.repository.record import RecordRepository


class NoteRepository(RecordRepository[Note]):
    kind = RecordKind.NOTE

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.NOTE.collection_key, configuration.NOTES_FILE
            )
        )

    def _convert_for_serialization(self, record: Note) -> dict[str, Any]:
        serializable_note = super()._convert_for_serialization(record)
        # Multi-line text is stored as a literal block
        if serializable_note["text"] is not None:
            serializable_note["text"] = LiteralString(serializable_note["text"])
        return serializable_note

    def toggle_pin(self, id: EntityId) -> Optional[bool]:
        note = self.get_record(id)
        if note is None:
            return None
        note["pinned"] = not note["pinned"]
        self.modify_record(note)
        return note["pinned"]


NOTE_REPO = NoteRepository()
