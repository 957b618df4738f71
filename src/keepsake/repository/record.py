# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from typing import Any, Callable, Generic, Iterable, Optional, TypeAlias, TypeVar, cast

from keepsake import time
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.record import Record, RecordAction, RecordEvent
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import Persistence

R = TypeVar("R", bound=Record)

RecordListener: TypeAlias = Callable[[RecordEvent], None]

logger = logging.getLogger(__name__)


class RecordRepository(Generic[R]):
    """
    Single owner of one record collection.

    Every mutation rewrites the whole collection through the persistence
    adapter before listeners are notified. Persistence failures are logged and
    the in-memory collection stays authoritative for the session. Callers only
    ever receive deep copies. Records that cannot be read back are skipped with
    a warning.

    Listeners registered with subscribe() are for hosts that keep a live view
    of the collection; the terminal commands re-read after each mutation.
    """

    kind: RecordKind

    def __init__(self, persistence: Persistence) -> None:
        self._persistence = persistence
        self._records: Optional[list[R]] = None
        self._issued_ids: set[EntityId] = set()
        self._listeners: list[RecordListener] = []
        self._lock = threading.RLock()

    @property
    def records(self) -> list[R]:
        if self._records is None:
            with self._lock:
                if self._records is None:
                    self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        records: list[R] = []
        for raw_record in self._persistence.load():
            try:
                if not isinstance(raw_record, dict):
                    raise TypeError(
                        f"expected a mapping, got {type(raw_record).__name__}"
                    )
                record = self._convert_for_deserialization(raw_record)
                entity_id = cast(EntityId, record["id"])
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("skipping unreadable %s record: %r", self.kind, e)
                continue
            records.append(record)
            self._issued_ids.add(entity_id)
        self._records = records

    def __save_data(self) -> bool:
        serializable_records = [
            self._convert_for_serialization(record)
            for record in deepcopy(self.records)
        ]
        saved = self._persistence.save(serializable_records)
        if not saved:
            logger.warning(
                "%s collection kept in memory only, persistence failed", self.kind
            )
        return saved

    def _convert_for_serialization(self, record: R) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["created"] = time.datetime_to_iso_str(
            serializable_record["created"]
        )
        serializable_record["updated"] = time.datetime_to_iso_str(
            serializable_record["updated"]
        )
        return serializable_record

    def _convert_for_deserialization(self, record: dict[str, Any]) -> R:
        deserializable_record = record
        deserializable_record["created"] = time.datetime_from_str(
            deserializable_record["created"]
        )
        deserializable_record["updated"] = time.datetime_from_str(
            deserializable_record["updated"]
        )
        return cast(R, deserializable_record)

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        """
        Register a listener and return a callable that removes it.

        Meant for hosts that keep a live view of the collection. The terminal
        commands do not subscribe; they re-read after each mutation.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __notify(self, action: RecordAction, ids: list[EntityId]) -> None:
        event: RecordEvent = {"kind": self.kind, "action": action, "ids": ids}
        for listener in list(self._listeners):
            listener(event)

    def __generate_unique_id(self) -> EntityId:
        entity_id = generate_entity_id()
        while entity_id in self._issued_ids:
            entity_id = generate_entity_id()
        self._issued_ids.add(entity_id)
        return entity_id

    def __index_of(self, id: EntityId) -> Optional[int]:
        for index, record in enumerate(self.records):
            if record["id"] == id:
                return index
        return None

    def save_new_record(self, record: R) -> EntityId:
        with self._lock:
            # load first so ids already on disk count as issued
            records = self.records
            new_record = deepcopy(record)
            new_record["id"] = self.__generate_unique_id()
            now = time.now_utc()
            new_record["created"] = now
            new_record["updated"] = now

            records.append(new_record)
            self.__save_data()
            entity_id = cast(EntityId, new_record["id"])

        self.__notify(RecordAction.ADDED, [entity_id])
        return entity_id

    def modify_record(self, record: R) -> bool:
        """
        Replace the stored record that has the same id.

        The stored id and creation timestamp are kept. Returns False, without
        persisting anything, when no record has that id.
        """
        if record["id"] is None:
            return False

        with self._lock:
            index = self.__index_of(record["id"])
            if index is None:
                return False

            existing = self.records[index]
            replacement = deepcopy(record)
            replacement["id"] = existing["id"]
            replacement["created"] = existing["created"]
            replacement["updated"] = time.now_utc()

            self.records[index] = replacement
            self.__save_data()
            entity_id = cast(EntityId, replacement["id"])

        self.__notify(RecordAction.MODIFIED, [entity_id])
        return True

    def delete_record(self, id: EntityId) -> bool:
        return self.delete_records([id]) == 1

    def delete_records(self, ids: Iterable[EntityId]) -> int:
        """Remove every record whose id is listed; unknown ids are ignored."""
        id_set = set(ids)

        with self._lock:
            removed_ids = [
                cast(EntityId, record["id"])
                for record in self.records
                if record["id"] in id_set
            ]
            if len(removed_ids) == 0:
                return 0

            self._records = [
                record for record in self.records if record["id"] not in id_set
            ]
            self.__save_data()

        self.__notify(RecordAction.DELETED, removed_ids)
        return len(removed_ids)

    def clear_records(self) -> None:
        with self._lock:
            removed_ids = [cast(EntityId, record["id"]) for record in self.records]
            self._records = []
            self.__save_data()

        self.__notify(RecordAction.CLEARED, removed_ids)

    def get_all_records(self) -> list[R]:
        return deepcopy(self.records)

    def get_record(self, id: EntityId) -> Optional[R]:
        index = self.__index_of(id)
        if index is None:
            return None
        return deepcopy(self.records[index])

    def count(self) -> int:
        return len(self.records)

    def existing_ids(self, ids: Iterable[EntityId]) -> list[EntityId]:
        """The given ids that still belong to a stored record, in the given order."""
        stored_ids = {record["id"] for record in self.records}
        return [id for id in ids if id in stored_ids]

    def _replace_state(self, id: EntityId, state: Any) -> bool:
        """Install a new status variant on a record, dropping the previous one."""
        with self._lock:
            record = self.get_record(id)
            if record is None:
                return False
            cast(dict[str, Any], record)["state"] = state
            return self.modify_record(record)
