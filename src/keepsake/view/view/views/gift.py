# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.model.entity_id import EntityId
from keepsake.model.gift import Gift
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.gift import GiftStatistics
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_date_str_optional,
)
from keepsake.view.view.util import format_budget
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import counts_report, statistics_report


def gifts_report(
    report_name: str,
    gifts: list[Gift],
    columns: list[str] = ["id", "title", "person", "category", "budget", "status", "date"],
) -> None:
    header(report_name)

    gifts_table = Table(box=box.SIMPLE)
    for column in columns:
        gifts_table.add_column(column)

    for gift in gifts:
        state = gift["state"]
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(RecordKind.GIFT, cast(EntityId, gift["id"]))
                )
            elif column == "title":
                column_value = gift["title"]
            elif column == "person":
                column_value = gift["person"] or ""
            elif column == "category":
                column_value = gift["category"] or ""
            elif column == "budget":
                column_value = format_budget(gift["budget"])
            elif column == "status":
                column_value = state["status"]
            elif column == "date":
                if state["status"] == "purchased":
                    column_value = datetime_to_display_local_date_str(state["purchased"])
                elif state["status"] == "given":
                    column_value = datetime_to_display_local_date_str(state["given"])
            elif column == "note":
                column_value = gift["note"] or ""
            row.append(column_value)
        gifts_table.add_row(*row)

    console = Console()
    console.print(gifts_table)


def single_gift_report(gift: Gift) -> None:
    header("gift")

    gift_table = Table(box=box.SIMPLE)
    gift_table.add_column("property")
    gift_table.add_column("value")

    state = gift["state"]
    gift_table.add_row(
        "id", str(ID_MAP_REPO.associate_id(RecordKind.GIFT, cast(EntityId, gift["id"])))
    )
    gift_table.add_row("title", gift["title"])
    gift_table.add_row("person", gift["person"] or "")
    gift_table.add_row("category", gift["category"] or "")
    gift_table.add_row("budget", format_budget(gift["budget"]))
    gift_table.add_row("note", gift["note"] or "")
    gift_table.add_row("status", state["status"])
    if state["status"] == "purchased":
        gift_table.add_row(
            "purchased", datetime_to_display_local_date_str(state["purchased"])
        )
    elif state["status"] == "given":
        gift_table.add_row(
            "purchased",
            datetime_to_display_local_date_str_optional(state["purchased"]) or "",
        )
        gift_table.add_row("given", datetime_to_display_local_date_str(state["given"]))
    gift_table.add_row("created", datetime_to_display_local_date_str(gift["created"]))

    console = Console()
    console.print(gift_table)


def gift_statistics_report(statistics: GiftStatistics) -> None:
    statistics_report(
        "gifts",
        [
            ("total gifts", str(statistics["total"])),
            ("planned", str(statistics["planned"])),
            ("purchased", str(statistics["purchased"])),
            ("given", f"{statistics['given']} ({statistics['given_percentage']}%)"),
            ("total budget", format_budget(statistics["total_budget"])),
            ("open budget", format_budget(statistics["open_budget"])),
        ],
    )
    counts_report("per person", statistics["per_person"])
