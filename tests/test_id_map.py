# SPDX-License-Identifier: MIT

from pathlib import Path

from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import IdMapRepository


def test_short_ids_are_per_kind(tmp_path: Path) -> None:
    repo = IdMapRepository(tmp_path)

    assert repo.associate_id(RecordKind.BOOK, "book-a") == 1
    assert repo.associate_id(RecordKind.BOOK, "book-b") == 2
    assert repo.associate_id(RecordKind.BOOK, "book-a") == 1
    assert repo.associate_id(RecordKind.NOTE, "note-a") == 1

    assert repo.get_real_id(RecordKind.BOOK, 2) == "book-b"
    assert repo.get_real_id(RecordKind.NOTE, 1) == "note-a"
    assert repo.get_real_id(RecordKind.GIFT, 1) is None


def test_short_ids_survive_reload(tmp_path: Path) -> None:
    IdMapRepository(tmp_path).associate_id(RecordKind.IDEA, "idea-a")

    assert IdMapRepository(tmp_path).get_real_id(RecordKind.IDEA, 1) == "idea-a"


def test_clear_ids(tmp_path: Path) -> None:
    repo = IdMapRepository(tmp_path)
    repo.associate_id(RecordKind.BOOK, "book-a")

    repo.clear_ids()

    assert repo.get_real_id(RecordKind.BOOK, 1) is None
    assert IdMapRepository(tmp_path).get_real_id(RecordKind.BOOK, 1) is None
    assert repo.associate_id(RecordKind.BOOK, "book-b") == 1
