# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from keepsake import state as app_state
from keepsake.terminal import (
    book,
    configuration,
    gift,
    idea,
    note,
    phrase,
    recipe,
)
from keepsake.terminal.custom_typer import OrderedAliasedTyperGroup
from keepsake.terminal.search import search
from keepsake.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Keepsake - small personal collections in the CLI",
    no_args_is_help=True,
)
app.add_typer(book.app, name="book, b", help="Reading list and library")
app.add_typer(phrase.app, name="phrase, p", help="Evening phrases ritual")
app.add_typer(idea.app, name="idea, i", help="Date ideas and memories")
app.add_typer(gift.app, name="gift, g", help="Gift planner")
app.add_typer(recipe.app, name="recipe, r", help="Recipes")
app.add_typer(note.app, name="note, n", help="Notes")
app.add_typer(configuration.app, name="config, c", help="Configuration")
app.command(name="search, s")(search)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    keep_ids: Annotated[
        bool,
        typer.Option(
            "--keep-ids",
            help="Keep the short ids of the previous listing",
        ),
    ] = False,
) -> None:
    """
    Keepsake - small personal collections in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if keep_ids:
        app_state.set_renumber_short_ids(False)


def run() -> None:
    app()
