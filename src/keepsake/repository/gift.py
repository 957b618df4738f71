# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId
from keepsake.model.gift import Gift
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import Persistence, YamlFilePersistence
from keepsake.repository.record import RecordRepository
from keepsake.template.gift import (
    get_given_state,
    get_planned_state,
    get_purchased_state,
)


class GiftRepository(RecordRepository[Gift]):
    kind = RecordKind.GIFT

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.GIFT.collection_key, configuration.GIFTS_FILE
            )
        )

    def _convert_for_serialization(self, record: Gift) -> dict[str, Any]:
        serializable_gift = super()._convert_for_serialization(record)
        state = serializable_gift["state"]
        if state["status"] == "purchased":
            state["purchased"] = time.datetime_to_iso_str(state["purchased"])
        elif state["status"] == "given":
            state["purchased"] = time.datetime_to_iso_str_optional(state["purchased"])
            state["given"] = time.datetime_to_iso_str(state["given"])
        return serializable_gift

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Gift:
        deserializable_gift = super()._convert_for_deserialization(record)
        state = cast(dict[str, Any], deserializable_gift["state"])
        if state["status"] == "purchased":
            state["purchased"] = time.datetime_from_str(state["purchased"])
        elif state["status"] == "given":
            state["purchased"] = time.datetime_from_str_optional(state["purchased"])
            state["given"] = time.datetime_from_str(state["given"])
        return deserializable_gift

    def mark_purchased(self, id: EntityId) -> bool:
        return self._replace_state(id, get_purchased_state())

    def mark_given(self, id: EntityId) -> bool:
        """Mark a gift as given, keeping the purchase date when there is one."""
        gift = self.get_record(id)
        if gift is None:
            return False
        state = gift["state"]
        purchased = None
        if state["status"] == "purchased":
            purchased = state["purchased"]
        elif state["status"] == "given":
            purchased = state["purchased"]
        return self._replace_state(id, get_given_state(purchased))

    def mark_planned(self, id: EntityId) -> bool:
        return self._replace_state(id, get_planned_state())


GIFT_REPO = GiftRepository()
