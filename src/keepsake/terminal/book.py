# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import click
import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.book import BOOK_STATUSES, BookStatus
from keepsake.model.record_kind import RecordKind
from keepsake.repository.book import BOOK_REPO
from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.service.book import (
    BookSort,
    CompletionPeriod,
    RatingBucket,
    filter_books,
    library_statistics,
    reading_history,
    sort_books,
)
from keepsake.template.book import (
    get_book_template,
    get_completed_state,
    get_reading_state,
)
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.validate import (
    validate_pages,
    validate_rating,
    validate_real_id,
    validate_real_ids,
    validate_text,
    validate_title,
)
from keepsake.time import DateWindow
from keepsake.view.view.views import book as book_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    author: Annotated[Optional[str], typer.Option("--author", "-a")] = None,
    notes: Annotated[
        Optional[str], typer.Option("--notes", "-n", callback=validate_text)
    ] = None,
    status: Annotated[
        str,
        typer.Option(
            "--status", "-s", click_type=click.Choice(list(BOOK_STATUSES))
        ),
    ] = "want_to_read",
    current_page: Annotated[Optional[int], typer.Option("--current-page", "-cp")] = None,
    total_pages: Annotated[Optional[int], typer.Option("--total-pages", "-tp")] = None,
    rating: Annotated[
        Optional[int],
        typer.Option("--rating", "-r", callback=validate_rating, help="1 to 10"),
    ] = None,
) -> None:
    current_page, total_pages = validate_pages(current_page, total_pages)
    if status != "reading" and (current_page is not None or total_pages is not None):
        raise typer.BadParameter("Only books being read have page counts")
    if status != "completed" and rating is not None:
        raise typer.BadParameter("Only completed books have a rating")

    book = get_book_template()
    book["title"] = title
    book["author"] = validate_text(author)
    book["notes"] = notes
    if status == "reading":
        book["state"] = get_reading_state(current_page, total_pages)
    elif status == "completed":
        book["state"] = get_completed_state(rating)

    id = BOOK_REPO.save_new_record(book)

    new_book = BOOK_REPO.get_record(id)
    if new_book is not None:
        book_report.single_book_report(new_book)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", callback=validate_title)
    ] = None,
    author: Annotated[Optional[str], typer.Option("--author", "-a")] = None,
    notes: Annotated[
        Optional[str], typer.Option("--notes", "-n", callback=validate_text)
    ] = None,
    remove_author: Annotated[bool, typer.Option("--remove-author", "-ra")] = False,
    remove_notes: Annotated[bool, typer.Option("--remove-notes", "-rn")] = False,
) -> None:
    real_id = validate_real_id(RecordKind.BOOK, id)
    book = BOOK_REPO.get_record(real_id)
    if book is None:
        raise typer.BadParameter(f"No book with id {id}")

    if title is not None:
        book["title"] = title
    if author is not None:
        book["author"] = validate_text(author)
    if notes is not None:
        book["notes"] = notes
    if remove_author:
        book["author"] = None
    if remove_notes:
        book["notes"] = None

    BOOK_REPO.modify_record(book)

    modified_book = BOOK_REPO.get_record(real_id)
    if modified_book is not None:
        book_report.single_book_report(modified_book)


@app.command("list, ls")
def list_books(
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", click_type=click.Choice(list(BOOK_STATUSES))),
    ] = None,
    rating: Annotated[
        RatingBucket,
        typer.Option("--rating", "-r", help="high: 8+, medium: 5-7, low: below 5"),
    ] = RatingBucket.ALL,
    period: Annotated[
        CompletionPeriod,
        typer.Option("--period", "-p", help="completion date window"),
    ] = CompletionPeriod.ALL,
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
    sort: Annotated[BookSort, typer.Option("--sort", "-o")] = BookSort.RECENT,
) -> None:
    clear_id_map_if_required()

    books = filter_books(
        BOOK_REPO.get_all_records(),
        status=cast(Optional[BookStatus], status),
        rating=rating,
        period=period,
        query=search,
    )
    book_report.books_report("books", sort_books(books, sort))


@app.command("wishlist, w")
def wishlist() -> None:
    clear_id_map_if_required()

    books = BOOK_REPO.get_books_with_status("want_to_read")
    book_report.books_report(
        "wishlist", sort_books(books, BookSort.RECENT), ["id", "title", "author", "updated"]
    )


@app.command("history, hi")
def history(
    rating: Annotated[
        RatingBucket,
        typer.Option("--rating", "-r", help="high: 8+, medium: 5-7, low: below 5"),
    ] = RatingBucket.ALL,
    period: Annotated[CompletionPeriod, typer.Option("--period", "-p")] = (
        CompletionPeriod.ALL
    ),
    search: Annotated[Optional[str], typer.Option("--search", "-q")] = None,
) -> None:
    clear_id_map_if_required()

    books = reading_history(BOOK_REPO.get_all_records(), rating, period, search)
    book_report.books_report(
        "history", books, ["id", "title", "author", "rating", "completed"]
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    book = BOOK_REPO.get_record(validate_real_id(RecordKind.BOOK, id))
    if book is None:
        raise typer.BadParameter(f"No book with id {id}")
    book_report.single_book_report(book)


@app.command("start, st", no_args_is_help=True)
def start(
    id: int,
    current_page: Annotated[Optional[int], typer.Option("--current-page", "-cp")] = None,
    total_pages: Annotated[Optional[int], typer.Option("--total-pages", "-tp")] = None,
) -> None:
    current_page, total_pages = validate_pages(current_page, total_pages)
    real_id = validate_real_id(RecordKind.BOOK, id)

    BOOK_REPO.start_reading(real_id, current_page, total_pages)
    __show(real_id)


@app.command("progress, pr", no_args_is_help=True)
def progress(
    id: int,
    current_page: int,
    total_pages: Annotated[Optional[int], typer.Option("--total-pages", "-tp")] = None,
) -> None:
    real_id = validate_real_id(RecordKind.BOOK, id)
    book = BOOK_REPO.get_record(real_id)
    if book is None or book["state"]["status"] != "reading":
        raise typer.BadParameter("Only books being read have progress")

    known_total = (
        total_pages if total_pages is not None else book["state"]["total_pages"]
    )
    validate_pages(current_page, known_total)

    BOOK_REPO.update_progress(real_id, current_page, total_pages)
    __show(real_id)


@app.command("complete, c", no_args_is_help=True)
def complete(
    id: int,
    rating: Annotated[
        Optional[int],
        typer.Option("--rating", "-r", callback=validate_rating, help="1 to 10"),
    ] = None,
) -> None:
    real_id = validate_real_id(RecordKind.BOOK, id)

    BOOK_REPO.complete_book(real_id, rating)
    __show(real_id)


@app.command("want, wa", no_args_is_help=True)
def want(id: int) -> None:
    """Move a book back to the wishlist."""
    real_id = validate_real_id(RecordKind.BOOK, id)

    BOOK_REPO.move_to_wishlist(real_id)
    __show(real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = BOOK_REPO.existing_ids(validate_real_ids(RecordKind.BOOK, id))
    if len(real_ids) == 0:
        typer.echo("No book(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} book(s)?", abort=True)

    deleted = BOOK_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} book(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {BOOK_REPO.count()} books?", abort=True)

    BOOK_REPO.clear_records()
    typer.echo("Deleted all books")


@app.command("stats")
def stats(
    period: Annotated[
        DateWindow, typer.Option("--period", "-p", help="window for books added")
    ] = DateWindow.ALL,
) -> None:
    clear_id_map_if_required()

    config = CONFIGURATION_REPO.get_config()
    statistics = library_statistics(
        BOOK_REPO.get_all_records(),
        yearly_goal=config["yearly_reading_goal"],
        monthly_goal=config["monthly_reading_goal"],
        period=period,
    )
    book_report.library_statistics_report(statistics)


def __show(real_id: str) -> None:
    book = BOOK_REPO.get_record(real_id)
    if book is not None:
        book_report.single_book_report(book)
