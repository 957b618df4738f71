# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from keepsake.model.entity_id import EntityId
from keepsake.model.note import Note
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.note import NoteStatistics
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_datetime_str,
)
from keepsake.view.view.util import check, first_line, format_tags
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import counts_report, statistics_report


def notes_report(
    report_name: str,
    notes: list[Note],
    columns: list[str] = ["id", "pinned", "title", "first_line", "tags", "updated"],
) -> None:
    header(report_name)

    notes_table = Table(box=box.SIMPLE)
    for column in columns:
        if column == "first_line":
            notes_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            notes_table.add_column(column)

    for note in notes:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(RecordKind.NOTE, cast(EntityId, note["id"]))
                )
            elif column == "pinned":
                column_value = check(note["pinned"])
            elif column == "title":
                column_value = note["title"]
            elif column == "first_line":
                column_value = first_line(note["text"])
            elif column == "tags":
                column_value = format_tags(note["tags"])
            elif column == "updated":
                column_value = datetime_to_display_local_datetime_str(note["updated"])
            row.append(column_value)
        notes_table.add_row(*row)

    console = Console()
    console.print(notes_table)


def single_note_report(note: Note) -> None:
    header("note")

    note_table = Table(box=box.SIMPLE)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row(
        "id", str(ID_MAP_REPO.associate_id(RecordKind.NOTE, cast(EntityId, note["id"])))
    )
    note_table.add_row("title", note["title"])
    note_table.add_row("tags", format_tags(note["tags"]))
    note_table.add_row("pinned", check(note["pinned"]))
    note_table.add_row("created", datetime_to_display_local_date_str(note["created"]))
    note_table.add_row("updated", datetime_to_display_local_date_str(note["updated"]))

    console = Console()
    console.print(note_table)

    if note["text"] is not None and note["text"] != "":
        console.print(Panel(note["text"], title="Note Text", border_style="blue"))


def note_statistics_report(statistics: NoteStatistics) -> None:
    longest = statistics["longest"]
    statistics_report(
        "notes",
        [
            ("total notes", str(statistics["total"])),
            ("pinned", str(statistics["pinned"])),
            ("longest", longest["title"] if longest is not None else ""),
        ],
    )
    counts_report("per tag", statistics["tag_counts"])
