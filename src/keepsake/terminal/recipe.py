# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.recipe import RecipeCategory
from keepsake.model.record_kind import RecordKind
from keepsake.query.sort import sort_items
from keepsake.repository.recipe import RECIPE_REPO
from keepsake.service.recipe import (
    filter_recipes,
    recipe_of_the_day,
    recipe_statistics,
)
from keepsake.template.recipe import get_recipe_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.parse import parse_datetime
from keepsake.terminal.validate import (
    validate_real_id,
    validate_real_ids,
    validate_tags,
    validate_text,
    validate_title,
)
from keepsake.view.view.views import recipe as recipe_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(callback=validate_title)],
    category: Annotated[
        RecipeCategory, typer.Option("--category", "-c")
    ] = RecipeCategory.DINNER,
    ingredients: Annotated[
        Optional[list[str]],
        typer.Option(
            "--ingredient",
            "-i",
            callback=validate_tags,
            help="accepts multiple ingredient options",
        ),
    ] = None,
    instructions: Annotated[
        Optional[str], typer.Option("--instructions", "-s", callback=validate_text)
    ] = None,
    favorite: Annotated[bool, typer.Option("--favorite", "-f")] = False,
) -> None:
    recipe = get_recipe_template()
    recipe["title"] = title
    recipe["category"] = category
    recipe["ingredients"] = ingredients or []
    recipe["instructions"] = instructions
    recipe["favorite"] = favorite

    id = RECIPE_REPO.save_new_record(recipe)
    __show(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", callback=validate_title)
    ] = None,
    category: Annotated[
        Optional[RecipeCategory], typer.Option("--category", "-c")
    ] = None,
    ingredients: Annotated[
        Optional[list[str]],
        typer.Option(
            "--ingredient",
            "-i",
            callback=validate_tags,
            help="replaces the ingredient list, accepts multiple ingredient options",
        ),
    ] = None,
    instructions: Annotated[
        Optional[str], typer.Option("--instructions", "-s", callback=validate_text)
    ] = None,
    remove_instructions: Annotated[
        bool, typer.Option("--remove-instructions", "-rs")
    ] = False,
) -> None:
    real_id = validate_real_id(RecordKind.RECIPE, id)
    recipe = RECIPE_REPO.get_record(real_id)
    if recipe is None:
        raise typer.BadParameter(f"No recipe with id {id}")

    if title is not None:
        recipe["title"] = title
    if category is not None:
        recipe["category"] = category
    if ingredients is not None:
        recipe["ingredients"] = ingredients
    if instructions is not None:
        recipe["instructions"] = instructions
    if remove_instructions:
        recipe["instructions"] = None

    RECIPE_REPO.modify_record(recipe)
    __show(real_id)


@app.command("list, ls")
def list_recipes(
    category: Annotated[
        Optional[RecipeCategory], typer.Option("--category", "-c")
    ] = None,
    favorites: Annotated[bool, typer.Option("--favorites", "-f")] = False,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-q", help="matches title, ingredients, instructions"),
    ] = None,
) -> None:
    clear_id_map_if_required()

    recipes = filter_recipes(
        RECIPE_REPO.get_all_records(),
        category=category,
        favorites_only=favorites,
        query=search,
    )
    recipe_report.recipes_report("recipes", sort_items(recipes, ["title"]))


@app.command("today, td")
def today(
    category: Annotated[
        Optional[RecipeCategory], typer.Option("--category", "-c")
    ] = None,
) -> None:
    """Suggest a recipe for today."""
    clear_id_map_if_required()

    recipe = recipe_of_the_day(RECIPE_REPO.get_all_records(), category)
    if recipe is None:
        typer.echo("No recipes")
        return
    recipe_report.single_recipe_report(recipe, "recipe of the day")


@app.command("show, sh", no_args_is_help=True)
def show(id: int) -> None:
    __show(validate_real_id(RecordKind.RECIPE, id))


@app.command("favorite, fa", no_args_is_help=True)
def favorite(id: int) -> None:
    real_id = validate_real_id(RecordKind.RECIPE, id)

    is_favorite = RECIPE_REPO.toggle_favorite(real_id)
    typer.echo("Added to favorites" if is_favorite else "Removed from favorites")


@app.command("cooked, co", no_args_is_help=True)
def cooked(
    id: int,
    when: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--when",
            "-w",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, now, today, yesterday, or day offset like -1",
        ),
    ] = None,
) -> None:
    real_id = validate_real_id(RecordKind.RECIPE, id)

    RECIPE_REPO.mark_cooked(real_id, when)
    __show(real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_ids = RECIPE_REPO.existing_ids(validate_real_ids(RecordKind.RECIPE, id))
    if len(real_ids) == 0:
        typer.echo("No recipe(s) to delete")
        return
    if not yes:
        typer.confirm(f"Delete {len(real_ids)} recipe(s)?", abort=True)

    deleted = RECIPE_REPO.delete_records(real_ids)
    typer.echo(f"Deleted {deleted} recipe(s)")


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm(f"Delete all {RECIPE_REPO.count()} recipes?", abort=True)

    RECIPE_REPO.clear_records()
    typer.echo("Deleted all recipes")


@app.command("stats")
def stats() -> None:
    recipe_report.recipe_statistics_report(
        recipe_statistics(RECIPE_REPO.get_all_records())
    )


def __show(real_id: str) -> None:
    recipe = RECIPE_REPO.get_record(real_id)
    if recipe is not None:
        recipe_report.single_recipe_report(recipe)
