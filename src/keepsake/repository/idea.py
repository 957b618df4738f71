# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId
from keepsake.model.idea import Idea, IdeaCategory
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import (
    LiteralString,
    Persistence,
    YamlFilePersistence,
)
from keepsake.repository.record import RecordRepository
from keepsake.template.idea import get_completed_state, get_planned_state


class IdeaRepository(RecordRepository[Idea]):
    kind = RecordKind.IDEA

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.IDEA.collection_key, configuration.IDEAS_FILE
            )
        )

    def _convert_for_serialization(self, record: Idea) -> dict[str, Any]:
        serializable_idea = super()._convert_for_serialization(record)
        serializable_idea["category"] = str(serializable_idea["category"])
        serializable_idea["scheduled"] = time.datetime_to_iso_str_optional(
            serializable_idea["scheduled"]
        )
        if serializable_idea["description"] is not None:
            serializable_idea["description"] = LiteralString(
                serializable_idea["description"]
            )
        state = serializable_idea["state"]
        if state["status"] == "completed":
            state["completed"] = time.datetime_to_iso_str(state["completed"])
            if state["memory"] is not None:
                state["memory"] = LiteralString(state["memory"])
        return serializable_idea

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Idea:
        deserializable_idea = super()._convert_for_deserialization(record)
        deserializable_idea["category"] = IdeaCategory(deserializable_idea["category"])
        deserializable_idea["scheduled"] = time.datetime_from_str_optional(
            cast(Optional[str], deserializable_idea["scheduled"])
        )
        state = cast(dict[str, Any], deserializable_idea["state"])
        if state["status"] == "completed":
            state["completed"] = time.datetime_from_str(state["completed"])
        return deserializable_idea

    def complete_idea(self, id: EntityId, memory: Optional[str] = None) -> bool:
        return self._replace_state(id, get_completed_state(memory))

    def plan_idea(self, id: EntityId) -> bool:
        """Move an idea back to planned; any memory written for it is dropped."""
        return self._replace_state(id, get_planned_state())

    def set_memory(self, id: EntityId, memory: Optional[str]) -> bool:
        """
        Write the memory of an idea, completing it first if it is still planned.
        """
        idea = self.get_record(id)
        if idea is None:
            return False
        if idea["state"]["status"] == "planned":
            return self.complete_idea(id, memory)
        idea["state"]["memory"] = memory
        return self.modify_record(idea)


IDEA_REPO = IdeaRepository()
