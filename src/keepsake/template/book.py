# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.book import Book, Completed, Reading, WantToRead
from keepsake.time import now_utc


def get_book_template() -> Book:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "title": "",
        "author": None,
        "notes": None,
        "state": get_want_to_read_state(),
    }


def get_want_to_read_state() -> WantToRead:
    return {"status": "want_to_read"}


def get_reading_state(
    current_page: Optional[int] = None, total_pages: Optional[int] = None
) -> Reading:
    return {
        "status": "reading",
        "started": now_utc(),
        "current_page": current_page,
        "total_pages": total_pages,
    }


def get_completed_state(rating: Optional[int] = None) -> Completed:
    return {"status": "completed", "completed": now_utc(), "rating": rating}
