# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Any

import pytest

from keepsake.model.book import Book
from keepsake.model.entity_id import EntityId
from keepsake.model.record import RecordAction, RecordEvent
from keepsake.model.record_kind import RecordKind
from keepsake.repository import record as record_module
from keepsake.repository.book import BookRepository
from keepsake.repository.persistence import MemoryPersistence, Persistence
from keepsake.template.book import get_book_template


class FailingPersistence(Persistence):
    def save(self, records: list[dict[str, Any]]) -> bool:
        return False

    def load(self) -> list[dict[str, Any]]:
        return []


def make_book(title: str) -> Book:
    book = get_book_template()
    book["title"] = title
    return book


def test_save_new_record_grows_collection_and_is_retrievable() -> None:
    repository = BookRepository(MemoryPersistence())

    id = repository.save_new_record(make_book("Dune"))

    assert repository.count() == 1
    stored = repository.get_record(id)
    assert stored is not None
    assert stored["id"] == id
    assert stored["title"] == "Dune"


def test_save_new_record_persists_whole_collection() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)

    repository.save_new_record(make_book("Dune"))
    repository.save_new_record(make_book("Emma"))

    assert persistence.save_count == 2
    assert [book["title"] for book in persistence.load()] == ["Dune", "Emma"]


def test_save_new_record_does_not_keep_callers_object() -> None:
    repository = BookRepository(MemoryPersistence())
    book = make_book("Dune")

    id = repository.save_new_record(book)
    book["title"] = "changed"

    assert book["id"] is None
    stored = repository.get_record(id)
    assert stored is not None
    assert stored["title"] == "Dune"


def test_snapshots_are_copies() -> None:
    repository = BookRepository(MemoryPersistence())
    id = repository.save_new_record(make_book("Dune"))

    snapshot = repository.get_all_records()
    snapshot[0]["title"] = "changed"
    snapshot.clear()

    stored = repository.get_record(id)
    assert stored is not None
    assert stored["title"] == "Dune"
    assert repository.count() == 1


def test_modify_record_replaces_by_id_and_keeps_identity() -> None:
    repository = BookRepository(MemoryPersistence())
    id = repository.save_new_record(make_book("Dune"))
    original = repository.get_record(id)
    assert original is not None

    replacement = make_book("Dune Messiah")
    replacement["id"] = id
    assert repository.modify_record(replacement) is True

    stored = repository.get_record(id)
    assert stored is not None
    assert stored["title"] == "Dune Messiah"
    assert stored["created"] == original["created"]
    assert stored["updated"] >= original["updated"]


def test_modify_unknown_id_is_a_no_op() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)
    repository.save_new_record(make_book("Dune"))
    saves_before = persistence.save_count

    unknown = make_book("Ghost")
    unknown["id"] = "not-an-id"

    assert repository.modify_record(unknown) is False
    assert repository.modify_record(make_book("No id")) is False
    assert persistence.save_count == saves_before
    assert [book["title"] for book in repository.get_all_records()] == ["Dune"]


def test_delete_unknown_id_is_a_no_op() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)
    repository.save_new_record(make_book("Dune"))
    saves_before = persistence.save_count

    assert repository.delete_record("not-an-id") is False
    assert repository.delete_records(["not-an-id", "other"]) == 0
    assert persistence.save_count == saves_before
    assert repository.count() == 1


def test_batch_delete_keeps_untouched_record() -> None:
    repository = BookRepository(MemoryPersistence())
    first = repository.save_new_record(make_book("One"))
    second = repository.save_new_record(make_book("Two"))
    third = repository.save_new_record(make_book("Three"))

    assert repository.delete_records([first, third, "not-an-id"]) == 2

    remaining = repository.get_all_records()
    assert len(remaining) == 1
    assert remaining[0]["id"] == second
    assert remaining[0]["title"] == "Two"


def test_clear_records_empties_collection() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)
    repository.save_new_record(make_book("One"))
    repository.save_new_record(make_book("Two"))

    repository.clear_records()

    assert repository.count() == 0
    assert persistence.load() == []


def test_ids_are_never_reused(monkeypatch: pytest.MonkeyPatch) -> None:
    generated = iter(["a", "a", "b", "a", "c"])
    monkeypatch.setattr(record_module, "generate_entity_id", lambda: next(generated))
    repository = BookRepository(MemoryPersistence())

    first = repository.save_new_record(make_book("One"))
    second = repository.save_new_record(make_book("Two"))
    repository.delete_record(first)
    third = repository.save_new_record(make_book("Three"))

    assert (first, second, third) == ("a", "b", "c")


def test_loaded_ids_are_never_reissued(monkeypatch: pytest.MonkeyPatch) -> None:
    persistence = MemoryPersistence()
    BookRepository(persistence).save_new_record(make_book("One"))
    existing_id = persistence.load()[0]["id"]

    generated = iter([existing_id, "fresh"])
    monkeypatch.setattr(record_module, "generate_entity_id", lambda: next(generated))
    repository = BookRepository(persistence)

    assert repository.save_new_record(make_book("Two")) == "fresh"


def test_listeners_are_notified_after_each_mutation() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)
    events: list[RecordEvent] = []
    saves_seen: list[int] = []

    def listener(event: RecordEvent) -> None:
        events.append(event)
        saves_seen.append(persistence.save_count)

    unsubscribe = repository.subscribe(listener)
    id = repository.save_new_record(make_book("Dune"))
    repository.start_reading(id)
    repository.delete_record(id)
    repository.clear_records()
    unsubscribe()
    repository.save_new_record(make_book("Unseen"))

    assert [event["action"] for event in events] == [
        RecordAction.ADDED,
        RecordAction.MODIFIED,
        RecordAction.DELETED,
        RecordAction.CLEARED,
    ]
    assert all(event["kind"] == RecordKind.BOOK for event in events)
    assert events[0]["ids"] == [id]
    # listeners run once the collection is persisted
    assert saves_seen == [1, 2, 3, 4]


def test_no_op_mutations_do_not_notify() -> None:
    repository = BookRepository(MemoryPersistence())
    events: list[RecordEvent] = []
    repository.subscribe(events.append)

    repository.delete_record("not-an-id")
    repository.start_reading("not-an-id")

    assert events == []


def test_persistence_failure_is_logged_and_memory_stays_authoritative(
    caplog: pytest.LogCaptureFixture,
) -> None:
    repository = BookRepository(FailingPersistence())

    with caplog.at_level(logging.WARNING, logger="keepsake"):
        id = repository.save_new_record(make_book("Dune"))

    assert repository.get_record(id) is not None
    assert "persistence failed" in caplog.text


def test_concurrent_writers_keep_every_record() -> None:
    persistence = MemoryPersistence()
    repository = BookRepository(persistence)
    thread_count = 8
    adds_per_thread = 25
    ids: list[EntityId] = []

    def add_and_complete(thread_index: int) -> None:
        for index in range(adds_per_thread):
            id = repository.save_new_record(make_book(f"book {thread_index}-{index}"))
            repository.complete_book(id, 7)
            ids.append(id)

    threads = [
        threading.Thread(target=add_and_complete, args=(thread_index,))
        for thread_index in range(thread_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected = thread_count * adds_per_thread
    assert repository.count() == expected
    assert len(persistence.load()) == expected
    assert len(set(ids)) == expected
    assert all(
        book["state"]["status"] == "completed"
        for book in repository.get_all_records()
    )
