# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from keepsake.model.book import Book
from keepsake.model.entity_id import EntityId
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.book import LibraryStatistics, reading_progress
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_date_str_optional,
)
from keepsake.view.view.util import format_pages, format_rating, progress_bar
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import statistics_report

STATUS_COLORS = {
    "want_to_read": "grey62",
    "reading": "deep_sky_blue1",
    "completed": "green3",
}


def books_report(
    report_name: str,
    books: list[Book],
    columns: list[str] = [
        "id",
        "title",
        "author",
        "status",
        "pages",
        "rating",
        "updated",
    ],
) -> None:
    header(report_name)

    books_table = Table(box=box.SIMPLE)
    for column in columns:
        books_table.add_column(column)

    for book in books:
        state = book["state"]
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(RecordKind.BOOK, cast(EntityId, book["id"]))
                )
            elif column == "title":
                column_value = book["title"]
            elif column == "author":
                column_value = book["author"] or ""
            elif column == "status":
                color = STATUS_COLORS[state["status"]]
                column_value = f"[{color}]{state['status']}[/{color}]"
            elif column == "pages":
                column_value = format_pages(book)
            elif column == "rating":
                if state["status"] == "completed":
                    column_value = format_rating(state["rating"])
            elif column == "completed":
                if state["status"] == "completed":
                    column_value = datetime_to_display_local_date_str(
                        state["completed"]
                    )
            elif column == "updated":
                column_value = datetime_to_display_local_date_str(book["updated"])
            row.append(column_value)
        books_table.add_row(*row)

    console = Console()
    console.print(books_table)


def single_book_report(book: Book) -> None:
    header("book")

    book_table = Table(box=box.SIMPLE)
    book_table.add_column("property")
    book_table.add_column("value")

    state = book["state"]
    book_table.add_row(
        "id", str(ID_MAP_REPO.associate_id(RecordKind.BOOK, cast(EntityId, book["id"])))
    )
    book_table.add_row("title", book["title"])
    book_table.add_row("author", book["author"] or "")
    book_table.add_row("status", state["status"])
    if state["status"] == "reading":
        book_table.add_row("started", datetime_to_display_local_date_str(state["started"]))
        book_table.add_row("pages", format_pages(book))
        progress = reading_progress(book)
        if progress is not None:
            book_table.add_row("progress", f"{progress}%")
    elif state["status"] == "completed":
        book_table.add_row(
            "completed", datetime_to_display_local_date_str(state["completed"])
        )
        book_table.add_row("rating", format_rating(state["rating"]))
    book_table.add_row("created", datetime_to_display_local_date_str(book["created"]))
    book_table.add_row(
        "updated", datetime_to_display_local_date_str_optional(book["updated"]) or ""
    )

    console = Console()
    console.print(book_table)

    if book["notes"] is not None and book["notes"] != "":
        console.print(Panel(book["notes"], title="Notes", border_style="blue"))


def library_statistics_report(statistics: LibraryStatistics) -> None:
    average_rating = statistics["average_rating"]
    statistics_report(
        "library",
        [
            ("total books", str(statistics["total"])),
            (
                "want to read",
                f"{statistics['want_to_read']} ({statistics['want_to_read_percentage']}%)",
            ),
            ("reading", f"{statistics['reading']} ({statistics['reading_percentage']}%)"),
            (
                "completed",
                f"{statistics['completed']} ({statistics['completed_percentage']}%)",
            ),
            ("completed this month", str(statistics["completed_this_month"])),
            ("completed this year", str(statistics["completed_this_year"])),
            (
                "monthly goal",
                f"{progress_bar(statistics['monthly_goal_progress'])} "
                f"{statistics['completed_this_month']}/{statistics['monthly_goal']}",
            ),
            (
                "yearly goal",
                f"{progress_bar(statistics['yearly_goal_progress'])} "
                f"{statistics['completed_this_year']}/{statistics['yearly_goal']}",
            ),
            (
                "average rating",
                f"{average_rating:.1f}" if average_rating is not None else "",
            ),
        ],
    )

    if len(statistics["recent_activity"]) > 0:
        books_report(
            "recent activity",
            statistics["recent_activity"],
            ["id", "title", "status", "updated"],
        )
