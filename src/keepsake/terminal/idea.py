# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import click
import pendulum
import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.idea import IdeaCategory, IdeaStatus
from keepsake.model.record_kind import RecordKind
from keepsake.repository.idea import IDEA_REPO
from keepsake.service.idea import (
    filter_ideas,
    idea_statistics,
    ideas_for_date,
    memories as completed_memories,
    random_idea,
    upcoming_ideas,
)
from keepsake.template.idea import get_idea_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.parse import parse_datetime
from keepsake.terminal.validate import (
    validate_real_id,
    validate_real_ids,
    validate_text,
    validate_title,
)
from keepsake.time import DateWindow
from keepsake.view.view.views import idea as idea_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    description: Annotated[
        Optional[str], typer.Option("--description", "-d", callback=validate_text)
    ] = None,
    category: Annotated[
        IdeaCategory, typer.Option("--category", "-c")
    ] = IdeaCategory.DATE,
    scheduled: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--scheduled",
            "-s",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, today, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
) -> None:
    idea = get_idea_template()
    idea["title"] = title
    idea["description"] = description
    idea["category"] = category
    idea["scheduled"] = scheduled

    id = IDEA_REPO.save_new_record(idea)

    new_idea = IDEA_REPO.get_record(id)
    if new_idea is not None:
        idea_report.single_idea_report(new_idea)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", callback=validate_title)
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d", callback=validate_text)
    ] = None,
    category: Annotated[Optional[IdeaCategory], typer.Option("--category", "-c")] = None,
    scheduled: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--scheduled", "-s", parser=parse_datetime),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_scheduled: Annotated[bool, typer.Option("--remove-scheduled", "-rs")] = False,
) -> None:
    real_id = validate_real_id(RecordKind.IDEA, id)
    idea = IDEA_REPO.get_record(real_id)
    if idea is None:
        raise typer.BadParameter(f"No idea with id {id}")

    if title is not None:
        idea["title"] = title
    if description is not None:
        idea["description"] = description
    if category is not None:
        idea["category"] = category
    if scheduled is not None:
        idea["scheduled"] = scheduled
    if remove_description:
        idea["description"] = None
    if remove_scheduled:
        idea["scheduled"] = None

    IDEA_REPO.modify_record(idea)
    __show(real_id)


@app.command("list, ls")
def list_ideas(
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status", "-s", click_type=click.Choice(["planned", "completed"])
        ),
    ] = None,
    category: Annotated[Optional[IdeaCategory], typer.Option("--category", "-c")] = None,
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
) -> None:
    clear_id_map_if_required()

    ideas = filter_ideas(
        IDEA_REPO.get_all_records(),
        status=cast(Optional[IdeaStatus], status),
        category=category,
        query=search,
    )
    idea_report.ideas_report("ideas", ideas)


@app.command("memories, me")
def memories(
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
    window: Annotated[
        DateWindow, typer.Option("--window", "-w", help="completion date window")
    ] = DateWindow.ALL,
) -> None:
    clear_id_map_if_required()

    ideas = completed_memories(IDEA_REPO.get_all_records(), search, window)
    idea_report.ideas_report(
        "memories", ideas, ["id", "title", "category", "completed", "memory"]
    )


@app.command("day, dy")
def day(
    date: Annotated[
        str, typer.Argument(help="valid inputs: today, tomorrow, yesterday, YYYY-MM-DD")
    ] = "today",
) -> None:
    """List ideas scheduled on a date."""
    clear_id_map_if_required()

    idea_report.ideas_report(
        "ideas", ideas_for_date(IDEA_REPO.get_all_records(), date), sub_header=date
    )


@app.command("upcoming, up")
def upcoming(
    limit: Annotated[Optional[int], typer.Option("--limit", "-l")] = None,
) -> None:
    clear_id_map_if_required()

    idea_report.ideas_report(
        "upcoming",
        upcoming_ideas(IDEA_REPO.get_all_records(), limit),
        ["id", "title", "category", "scheduled"],
    )


@app.command("random, ra")
def random(
    category: Annotated[Optional[IdeaCategory], typer.Option("--category", "-c")] = None,
) -> None:
    """Suggest a planned idea at random."""
    clear_id_map_if_required()

    idea = random_idea(IDEA_REPO.get_all_records(), category)
    if idea is None:
        typer.echo("No planned ideas")
        return
    idea_report.single_idea_report(idea)


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    __show(validate_real_id(RecordKind.IDEA, id))


@app.command("complete, c", no_args_is_help=True)
def complete(
    id: int,
    memory: Annotated[
        Optional[str], typer.Option("--memory", "-m", callback=validate_text)
    ] = None,
) -> None:
    real_id = validate_real_id(RecordKind.IDEA, id)

    IDEA_REPO.complete_idea(real_id, memory)
    __show(real_id)


@app.command("memory, mm", no_args_is_help=True)
def memory(
    id: int,
    text: Annotated[str, typer.Argument(callback=validate_text)],
) -> None:
    """Write down the memory of an idea, completing it if needed."""
    real_id = validate_real_id(RecordKind.IDEA, id)

    IDEA_REPO.set_memory(real_id, text)
    __show(real_id)


@app.command("plan, p", no_args_is_help=True)
def plan(id: int) -> None:
    real_id = validate_real_id(RecordKind.IDEA, id)

    IDEA_REPO.plan_idea(real_id)
    __show(real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = IDEA_REPO.existing_ids(validate_real_ids(RecordKind.IDEA, id))
    if len(real_ids) == 0:
        typer.echo("No idea(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} idea(s)?", abort=True)

    deleted = IDEA_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} idea(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {IDEA_REPO.count()} ideas?", abort=True)

    IDEA_REPO.clear_records()
    typer.echo("Deleted all ideas")


@app.command("stats")
def stats() -> None:
    idea_report.idea_statistics_report(idea_statistics(IDEA_REPO.get_all_records()))


def __show(real_id: str) -> None:
    idea = IDEA_REPO.get_record(real_id)
    if idea is not None:
        idea_report.single_idea_report(idea)
