# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.record_kind import RecordKind
from keepsake.repository.phrase import DAILY_STATE_REPO, PHRASE_REPO
from keepsake.service.phrase import (
    current_phrase,
    filter_phrases,
    phrase_statistics,
    search_archive,
)
from keepsake.template.phrase import get_phrase_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.validate import (
    validate_phrase_text,
    validate_real_id,
    validate_real_ids,
)
from keepsake.view.view.views import phrase as phrase_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(text: Annotated[str, typer.Argument(callback=validate_phrase_text)]) -> None:
    phrase = get_phrase_template()
    phrase["text"] = text

    id = PHRASE_REPO.save_new_record(phrase)

    new_phrase = PHRASE_REPO.get_record(id)
    if new_phrase is not None:
        phrase_report.phrases_report("phrase", [new_phrase])


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int, text: Annotated[str, typer.Argument(callback=validate_phrase_text)]
) -> None:
    real_id = validate_real_id(RecordKind.PHRASE, id)
    phrase = PHRASE_REPO.get_record(real_id)
    if phrase is None:
        raise typer.BadParameter(f"No phrase with id {id}")

    phrase["text"] = text
    PHRASE_REPO.modify_record(phrase)

    modified_phrase = PHRASE_REPO.get_record(real_id)
    if modified_phrase is not None:
        phrase_report.phrases_report("phrase", [modified_phrase])


@app.command("list, ls")
def list_phrases(
    archived: Annotated[
        bool, typer.Option("--archived", "-ar", help="list the archive instead")
    ] = False,
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
) -> None:
    clear_id_map_if_required()

    phrases = PHRASE_REPO.get_all_records()
    if archived:
        phrase_report.phrases_report(
            "archive",
            search_archive(phrases, search or ""),
            ["id", "text", "custom", "archived"],
        )
    else:
        phrase_report.phrases_report(
            "phrases", filter_phrases(phrases, "active", search)
        )


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    phrase = PHRASE_REPO.get_record(validate_real_id(RecordKind.PHRASE, id))
    if phrase is None:
        raise typer.BadParameter(f"No phrase with id {id}")
    phrase_report.phrases_report(
        "phrase", [phrase], ["id", "text", "status", "custom", "archived", "created"]
    )


@app.command("tonight, t")
def tonight() -> None:
    """Show tonight's phrase, picking one if none is chosen yet."""
    phrases = PHRASE_REPO.get_all_records()
    daily_state = DAILY_STATE_REPO.get_daily_state()

    phrase = current_phrase(phrases, daily_state)
    if phrase is None or phrase["state"]["status"] != "active":
        DAILY_STATE_REPO.select_random_phrase(phrases)
        daily_state = DAILY_STATE_REPO.get_daily_state()
        phrase = current_phrase(phrases, daily_state)

    phrase_report.tonight_report(phrase, daily_state)


@app.command("next, nx")
def next_phrase() -> None:
    """Pick another phrase for tonight."""
    phrases = PHRASE_REPO.get_all_records()
    DAILY_STATE_REPO.select_random_phrase(phrases)

    daily_state = DAILY_STATE_REPO.get_daily_state()
    phrase_report.tonight_report(current_phrase(phrases, daily_state), daily_state)


@app.command("done")
def done() -> None:
    """Mark tonight's practice as completed."""
    daily_state = DAILY_STATE_REPO.complete_practice()
    phrase_report.tonight_report(
        current_phrase(PHRASE_REPO.get_all_records(), daily_state), daily_state
    )


@app.command("light, l")
def light() -> None:
    light_off = DAILY_STATE_REPO.toggle_light()
    typer.echo(f"Light {'off' if light_off else 'on'}")


@app.command("archive, ar", no_args_is_help=True)
def archive(id: str) -> None:
    real_ids = validate_real_ids(RecordKind.PHRASE, id)
    archived = len([real_id for real_id in real_ids if PHRASE_REPO.archive_phrase(real_id)])
    typer.echo(f"Archived {archived} phrase(s)")


@app.command("unarchive, ua", no_args_is_help=True)
def unarchive(id: str) -> None:
    real_ids = validate_real_ids(RecordKind.PHRASE, id)
    restored = len(
        [real_id for real_id in real_ids if PHRASE_REPO.unarchive_phrase(real_id)]
    )
    typer.echo(f"Restored {restored} phrase(s)")


@app.command("clear-archive")
def clear_archive(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(
            f"Delete {len(PHRASE_REPO.get_archived_phrases())} archived phrase(s)?",
            abort=True,
        )

    deleted = PHRASE_REPO.clear_archive()
    typer.echo(f"Deleted {deleted} archived phrase(s)")


@app.command("restore-defaults")
def restore_defaults() -> None:
    restored = PHRASE_REPO.restore_default_phrases()
    typer.echo(f"Restored {len(restored)} default phrase(s)")


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = PHRASE_REPO.existing_ids(validate_real_ids(RecordKind.PHRASE, id))
    if len(real_ids) == 0:
        typer.echo("No phrase(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} phrase(s)?", abort=True)

    deleted = PHRASE_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} phrase(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {PHRASE_REPO.count()} phrases?", abort=True)

    PHRASE_REPO.clear_records()
    typer.echo("Deleted all phrases")


@app.command("stats")
def stats() -> None:
    statistics = phrase_statistics(
        PHRASE_REPO.get_all_records(), DAILY_STATE_REPO.get_daily_state()
    )
    phrase_report.phrase_statistics_report(statistics)
