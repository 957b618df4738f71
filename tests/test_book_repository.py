# SPDX-License-Identifier: MIT

from keepsake.repository.book import BookRepository
from keepsake.repository.persistence import MemoryPersistence
from keepsake.template.book import get_book_template


def add_book(repository: BookRepository, title: str) -> str:
    book = get_book_template()
    book["title"] = title
    return repository.save_new_record(book)


def test_start_reading_a_wishlist_book() -> None:
    repository = BookRepository(MemoryPersistence())
    id = add_book(repository, "Dune")

    books = repository.get_all_records()
    assert len(books) == 1
    assert books[0]["state"] == {"status": "want_to_read"}

    assert repository.start_reading(id) is True

    book = repository.get_record(id)
    assert book is not None
    state = book["state"]
    assert state["status"] == "reading"
    assert state["current_page"] is None
    assert state["total_pages"] is None
    assert "rating" not in state
    assert "completed" not in state


def test_transitions_leave_only_the_new_status_fields() -> None:
    repository = BookRepository(MemoryPersistence())
    id = add_book(repository, "Dune")

    repository.start_reading(id, 10, 400)
    repository.complete_book(id, 9)
    book = repository.get_record(id)
    assert book is not None
    assert set(book["state"]) == {"status", "completed", "rating"}
    assert book["state"]["status"] == "completed"

    repository.start_reading(id)
    book = repository.get_record(id)
    assert book is not None
    assert set(book["state"]) == {"status", "started", "current_page", "total_pages"}
    assert book["state"]["current_page"] is None

    repository.move_to_wishlist(id)
    book = repository.get_record(id)
    assert book is not None
    assert book["state"] == {"status": "want_to_read"}


def test_update_progress_only_applies_while_reading() -> None:
    repository = BookRepository(MemoryPersistence())
    id = add_book(repository, "Dune")

    assert repository.update_progress(id, 10) is False

    repository.start_reading(id, total_pages=400)
    assert repository.update_progress(id, 120) is True

    book = repository.get_record(id)
    assert book is not None
    assert book["state"]["status"] == "reading"
    assert book["state"]["current_page"] == 120
    assert book["state"]["total_pages"] == 400


def test_transitions_on_unknown_id_return_false() -> None:
    repository = BookRepository(MemoryPersistence())

    assert repository.start_reading("not-an-id") is False
    assert repository.complete_book("not-an-id", 5) is False
    assert repository.move_to_wishlist("not-an-id") is False
    assert repository.update_progress("not-an-id", 1) is False


def test_get_books_with_status() -> None:
    repository = BookRepository(MemoryPersistence())
    dune = add_book(repository, "Dune")
    add_book(repository, "Emma")
    repository.complete_book(dune, 8)

    assert [book["title"] for book in repository.get_books_with_status("completed")] == [
        "Dune"
    ]
    assert [
        book["title"] for book in repository.get_books_with_status("want_to_read")
    ] == ["Emma"]
