# SPDX-License-Identifier: MIT

from keepsake.model.note import Note
from keepsake.time import now_utc


def get_note_template() -> Note:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "title": "",
        "text": None,
        "tags": None,
        "pinned": False,
    }
