# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.search import SearchResult
from keepsake.view.view.util import first_line
from keepsake.view.view.views.header import header


def search_results_view(report_name: str, results: list[SearchResult]) -> None:
    """
    Display search results in a table format.

    Args:
        report_name: The name of the report
        results: List of SearchResult objects to display
    """
    header(report_name)

    if not results:
        console = Console()
        console.print("No results found.")
        return

    search_table = Table(box=box.SIMPLE)
    search_table.add_column("id")
    search_table.add_column("kind")
    search_table.add_column("title")
    search_table.add_column("detail", no_wrap=True, overflow="ellipsis")

    for result in results:
        search_table.add_row(
            str(ID_MAP_REPO.associate_id(result["kind"], result["id"]))
            if result["id"] is not None
            else "",
            str(result["kind"]),
            result["title"],
            first_line(result["detail"]),
        )

    console = Console()
    console.print(search_table)
