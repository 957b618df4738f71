# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from keepsake import configuration
from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    table.add_row("yearly_reading_goal", str(config["yearly_reading_goal"]))
    table.add_row("monthly_reading_goal", str(config["monthly_reading_goal"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_file", config["log_file"] or "None")

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show report headers"),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Start short ids from 1 on every listing",
        ),
    ] = None,
    yearly_reading_goal: Annotated[
        Optional[int],
        typer.Option("--yearly-reading-goal", min=0, help="Books per year"),
    ] = None,
    monthly_reading_goal: Annotated[
        Optional[int],
        typer.Option("--monthly-reading-goal", min=0, help="Books per month"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    ] = None,
    log_file: Annotated[
        Optional[str], typer.Option("--log-file", help="Also write logs to this file")
    ] = None,
    remove_log_file: Annotated[
        bool, typer.Option("--remove-log-file", help="Stop writing logs to a file")
    ] = False,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        clear_ids_on_view=clear_ids_on_view,
        yearly_reading_goal=yearly_reading_goal,
        monthly_reading_goal=monthly_reading_goal,
        log_level=log_level,
        log_file=log_file,
        remove_log_file=remove_log_file,
    )
    typer.echo("Configuration updated")
