# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import click
import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.gift import GIFT_STATUSES, GiftStatus
from keepsake.model.record_kind import RecordKind
from keepsake.repository.gift import GIFT_REPO
from keepsake.service.gift import filter_gifts, gift_statistics
from keepsake.template.gift import get_gift_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.validate import (
    validate_budget,
    validate_real_id,
    validate_real_ids,
    validate_text,
    validate_title,
)
from keepsake.view.view.views import gift as gift_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    person: Annotated[Optional[str], typer.Option("--person", "-p")] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    note: Annotated[
        Optional[str], typer.Option("--note", "-n", callback=validate_text)
    ] = None,
    budget: Annotated[
        Optional[float], typer.Option("--budget", "-b", callback=validate_budget)
    ] = None,
) -> None:
    gift = get_gift_template()
    gift["title"] = title
    gift["person"] = validate_text(person)
    gift["category"] = validate_text(category)
    gift["note"] = note
    gift["budget"] = budget

    id = GIFT_REPO.save_new_record(gift)
    __show(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", callback=validate_title)
    ] = None,
    person: Annotated[Optional[str], typer.Option("--person", "-p")] = None,
    category: Annotated[Optional[str], typer.Option("--category", "-c")] = None,
    note: Annotated[
        Optional[str], typer.Option("--note", "-n", callback=validate_text)
    ] = None,
    budget: Annotated[
        Optional[float], typer.Option("--budget", "-b", callback=validate_budget)
    ] = None,
    remove_person: Annotated[bool, typer.Option("--remove-person", "-rp")] = False,
    remove_category: Annotated[bool, typer.Option("--remove-category", "-rc")] = False,
    remove_note: Annotated[bool, typer.Option("--remove-note", "-rn")] = False,
    remove_budget: Annotated[bool, typer.Option("--remove-budget", "-rb")] = False,
) -> None:
    real_id = validate_real_id(RecordKind.GIFT, id)
    gift = GIFT_REPO.get_record(real_id)
    if gift is None:
        raise typer.BadParameter(f"No gift with id {id}")

    if title is not None:
        gift["title"] = title
    if person is not None:
        gift["person"] = validate_text(person)
    if category is not None:
        gift["category"] = validate_text(category)
    if note is not None:
        gift["note"] = note
    if budget is not None:
        gift["budget"] = budget
    if remove_person:
        gift["person"] = None
    if remove_category:
        gift["category"] = None
    if remove_note:
        gift["note"] = None
    if remove_budget:
        gift["budget"] = None

    GIFT_REPO.modify_record(gift)
    __show(real_id)


@app.command("list, ls")
def list_gifts(
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", click_type=click.Choice(list(GIFT_STATUSES))),
    ] = None,
    person: Annotated[Optional[str], typer.Option("--person", "-p")] = None,
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
) -> None:
    clear_id_map_if_required()

    gifts = filter_gifts(
        GIFT_REPO.get_all_records(),
        status=cast(Optional[GiftStatus], status),
        person=person,
        query=search,
    )
    gift_report.gifts_report("gifts", gifts)


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    __show(validate_real_id(RecordKind.GIFT, id))


@app.command("purchase, pu", no_args_is_help=True)
def purchase(id: int) -> None:
    real_id = validate_real_id(RecordKind.GIFT, id)

    GIFT_REPO.mark_purchased(real_id)
    __show(real_id)


@app.command("give, gv", no_args_is_help=True)
def give(id: int) -> None:
    real_id = validate_real_id(RecordKind.GIFT, id)

    GIFT_REPO.mark_given(real_id)
    __show(real_id)


@app.command("plan, p", no_args_is_help=True)
def plan(id: int) -> None:
    real_id = validate_real_id(RecordKind.GIFT, id)

    GIFT_REPO.mark_planned(real_id)
    __show(real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = GIFT_REPO.existing_ids(validate_real_ids(RecordKind.GIFT, id))
    if len(real_ids) == 0:
        typer.echo("No gift(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} gift(s)?", abort=True)

    deleted = GIFT_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} gift(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {GIFT_REPO.count()} gifts?", abort=True)

    GIFT_REPO.clear_records()
    typer.echo("Deleted all gifts")


@app.command("stats")
def stats() -> None:
    gift_report.gift_statistics_report(gift_statistics(GIFT_REPO.get_all_records()))


def __show(real_id: str) -> None:
    gift = GIFT_REPO.get_record(real_id)
    if gift is not None:
        gift_report.single_gift_report(gift)
