# SPDX-License-Identifier: MIT

from typing import Any, Mapping

from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.view.view.views.header import header


def statistics_report(report_name: str, rows: list[tuple[str, str]]) -> None:
    header(report_name, "statistics")

    statistics_table = Table(box=box.SIMPLE)
    statistics_table.add_column("statistic")
    statistics_table.add_column("value", justify="right")
    for name, value in rows:
        statistics_table.add_row(name, value)

    console = Console()
    console.print(statistics_table)


def counts_report(title: str, counts: Mapping[str, Any]) -> None:
    """Print a two-column table of counts, e.g. records per category."""
    if len(counts) == 0:
        return

    counts_table = Table(box=box.SIMPLE, title=title)
    counts_table.add_column("value")
    counts_table.add_column("count", justify="right")
    for value, count in counts.items():
        counts_table.add_row(value, str(count))

    console = Console()
    console.print(counts_table)
