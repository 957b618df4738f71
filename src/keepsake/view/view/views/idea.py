# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from keepsake.model.entity_id import EntityId
from keepsake.model.idea import Idea
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.idea import IdeaStatistics
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_date_str_optional,
)
from keepsake.view.view.util import first_line
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import counts_report, statistics_report


def ideas_report(
    report_name: str,
    ideas: list[Idea],
    columns: list[str] = [
        "id",
        "title",
        "category",
        "status",
        "scheduled",
        "completed",
        "memory",
    ],
    sub_header: Optional[str] = None,
) -> None:
    header(report_name, sub_header)

    ideas_table = Table(box=box.SIMPLE)
    for column in columns:
        if column == "memory":
            ideas_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            ideas_table.add_column(column)

    for idea in ideas:
        state = idea["state"]
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(RecordKind.IDEA, cast(EntityId, idea["id"]))
                )
            elif column == "title":
                column_value = idea["title"]
            elif column == "category":
                column_value = str(idea["category"])
            elif column == "status":
                column_value = state["status"]
            elif column == "scheduled":
                column_value = (
                    datetime_to_display_local_date_str_optional(idea["scheduled"]) or ""
                )
            elif column == "completed":
                if state["status"] == "completed":
                    column_value = datetime_to_display_local_date_str(state["completed"])
            elif column == "memory":
                if state["status"] == "completed":
                    column_value = first_line(state["memory"])
            row.append(column_value)
        ideas_table.add_row(*row)

    console = Console()
    console.print(ideas_table)


def single_idea_report(idea: Idea) -> None:
    header("idea")

    idea_table = Table(box=box.SIMPLE)
    idea_table.add_column("property")
    idea_table.add_column("value")

    state = idea["state"]
    idea_table.add_row(
        "id", str(ID_MAP_REPO.associate_id(RecordKind.IDEA, cast(EntityId, idea["id"])))
    )
    idea_table.add_row("title", idea["title"])
    idea_table.add_row("category", str(idea["category"]))
    idea_table.add_row("status", state["status"])
    idea_table.add_row(
        "scheduled", datetime_to_display_local_date_str_optional(idea["scheduled"]) or ""
    )
    if state["status"] == "completed":
        idea_table.add_row(
            "completed", datetime_to_display_local_date_str(state["completed"])
        )
    idea_table.add_row("created", datetime_to_display_local_date_str(idea["created"]))

    console = Console()
    console.print(idea_table)

    if idea["description"] is not None:
        console.print(Panel(idea["description"], title="Description", border_style="blue"))
    if state["status"] == "completed" and state["memory"] is not None:
        console.print(Panel(state["memory"], title="Memory", border_style="plum1"))


def idea_statistics_report(statistics: IdeaStatistics) -> None:
    busiest_day = statistics["busiest_day"]
    longest_memory = statistics["longest_memory"]
    statistics_report(
        "ideas",
        [
            ("total ideas", str(statistics["total"])),
            ("planned", str(statistics["planned"])),
            (
                "completed",
                f"{statistics['completed']} ({statistics['completed_percentage']}%)",
            ),
            ("completed this month", str(statistics["completed_this_month"])),
            ("upcoming", str(statistics["upcoming"])),
            (
                "busiest day",
                f"{busiest_day[0]} ({busiest_day[1]})" if busiest_day is not None else "",
            ),
            (
                "longest memory",
                longest_memory["title"] if longest_memory is not None else "",
            ),
        ],
    )
    counts_report("per category", statistics["per_category"])
