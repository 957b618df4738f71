# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.record_kind import RecordKind
from keepsake.repository.note import NOTE_REPO
from keepsake.service.note import filter_notes, note_statistics, sort_notes
from keepsake.template.note import get_note_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.validate import (
    validate_real_id,
    validate_real_ids,
    validate_tags,
    validate_text,
    validate_title,
)
from keepsake.view.view.views import note as note_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    text: Annotated[
        Optional[str], typer.Option("--text", "-x", callback=validate_text)
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag", "-t", callback=validate_tags, help="accepts multiple tag options"
        ),
    ] = None,
    pinned: Annotated[bool, typer.Option("--pinned", "-p")] = False,
) -> None:
    note = get_note_template()
    note["title"] = title
    note["text"] = text
    note["tags"] = tags
    note["pinned"] = pinned

    id = NOTE_REPO.save_new_record(note)
    __show(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-ti", callback=validate_title)
    ] = None,
    text: Annotated[
        Optional[str], typer.Option("--text", "-x", callback=validate_text)
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--add-tag", "-t", callback=validate_tags, help="accepts multiple tag options"
        ),
    ] = None,
    remove_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--remove-tag", "-rt", help="accepts multiple tag options"
        ),
    ] = None,
    remove_text: Annotated[bool, typer.Option("--remove-text", "-rx")] = False,
) -> None:
    real_id = validate_real_id(RecordKind.NOTE, id)
    note = NOTE_REPO.get_record(real_id)
    if note is None:
        raise typer.BadParameter(f"No note with id {id}")

    if title is not None:
        note["title"] = title
    if text is not None:
        note["text"] = text
    if remove_text:
        note["text"] = None
    if add_tags is not None:
        note["tags"] = validate_tags((note["tags"] or []) + add_tags)
    if remove_tags is not None and note["tags"] is not None:
        note["tags"] = validate_tags(
            [tag for tag in note["tags"] if tag not in remove_tags]
        )

    NOTE_REPO.modify_record(note)
    __show(real_id)


@app.command("list, ls")
def list_notes(
    tag: Annotated[Optional[str], typer.Option("--tag", "-t")] = None,
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
    pinned: Annotated[bool, typer.Option("--pinned", "-p")] = False,
) -> None:
    clear_id_map_if_required()

    notes = filter_notes(NOTE_REPO.get_all_records(), tag, search, pinned)
    note_report.notes_report("notes", sort_notes(notes))


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    __show(validate_real_id(RecordKind.NOTE, id))


@app.command("pin", no_args_is_help=True)
def pin(id: int) -> None:
    """Pin or unpin a note."""
    real_id = validate_real_id(RecordKind.NOTE, id)

    pinned = NOTE_REPO.toggle_pin(real_id)
    typer.echo("Pinned" if pinned else "Unpinned")


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = NOTE_REPO.existing_ids(validate_real_ids(RecordKind.NOTE, id))
    if len(real_ids) == 0:
        typer.echo("No note(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} note(s)?", abort=True)

    deleted = NOTE_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} note(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {NOTE_REPO.count()} notes?", abort=True)

    NOTE_REPO.clear_records()
    typer.echo("Deleted all notes")


@app.command("stats")
def stats() -> None:
    note_report.note_statistics_report(note_statistics(NOTE_REPO.get_all_records()))


def __show(real_id: str) -> None:
    note = NOTE_REPO.get_record(real_id)
    if note is not None:
        note_report.single_note_report(note)
