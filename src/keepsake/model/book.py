# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from keepsake.model.record import Record

BookStatus = Literal["want_to_read", "reading", "completed"]

BOOK_STATUSES: tuple[BookStatus, ...] = ("want_to_read", "reading", "completed")


class WantToRead(TypedDict):
    status: Literal["want_to_read"]


class Reading(TypedDict):
    status: Literal["reading"]
    started: pendulum.DateTime
    current_page: Optional[int]
    total_pages: Optional[int]


class Completed(TypedDict):
    status: Literal["completed"]
    completed: pendulum.DateTime
    rating: Optional[int]  # 1-10


BookState = WantToRead | Reading | Completed


class Book(Record):
    title: str
    author: Optional[str]
    notes: Optional[str]
    state: BookState
