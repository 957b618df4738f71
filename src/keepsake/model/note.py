# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.record import Record


class Note(Record):
    title: str
    text: Optional[str]
    tags: Optional[list[str]]
    pinned: bool
