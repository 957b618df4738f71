# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from keepsake.model.entity_id import EntityId
from keepsake.model.phrase import DailyState, Phrase
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.phrase import PhraseStatistics
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_datetime_str_optional,
)
from keepsake.view.view.util import check
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import statistics_report


def phrases_report(
    report_name: str,
    phrases: list[Phrase],
    columns: list[str] = ["id", "text", "status", "custom", "created"],
) -> None:
    header(report_name)

    phrases_table = Table(box=box.SIMPLE)
    for column in columns:
        phrases_table.add_column(column)

    for phrase in phrases:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(
                        RecordKind.PHRASE, cast(EntityId, phrase["id"])
                    )
                )
            elif column == "text":
                column_value = phrase["text"]
            elif column == "status":
                column_value = phrase["state"]["status"]
            elif column == "custom":
                column_value = check(phrase["custom"])
            elif column == "archived":
                if phrase["state"]["status"] == "archived":
                    column_value = datetime_to_display_local_date_str(
                        phrase["state"]["archived"]
                    )
            elif column == "created":
                column_value = datetime_to_display_local_date_str(phrase["created"])
            row.append(column_value)
        phrases_table.add_row(*row)

    console = Console()
    console.print(phrases_table)


def tonight_report(phrase: Optional[Phrase], daily_state: DailyState) -> None:
    header("tonight", daily_state["day"])

    console = Console()
    if phrase is None:
        console.print("No active phrases. Add one or restore the defaults.")
    else:
        console.print(Panel(phrase["text"], title="Tonight", border_style="plum1"))

    practice = "done" if daily_state["completed"] else "not yet"
    completed_at = datetime_to_display_local_datetime_str_optional(
        daily_state["completed_at"]
    )
    if completed_at is not None:
        practice = f"{practice} ({completed_at})"
    console.print(f"practice: {practice}")
    console.print(f"light: {'off' if daily_state['light_off'] else 'on'}")


def phrase_statistics_report(statistics: PhraseStatistics) -> None:
    statistics_report(
        "phrases",
        [
            ("total phrases", str(statistics["total"])),
            ("active", str(statistics["active"])),
            (
                "archived",
                f"{statistics['archived']} ({statistics['archived_percentage']}%)",
            ),
            ("custom", str(statistics["custom"])),
            ("built in", str(statistics["built_in"])),
            ("practice completed today", check(statistics["practice_completed"])),
            ("light off", check(statistics["light_off"])),
        ],
    )
