# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from keepsake.model.entity_id import EntityId
from keepsake.model.recipe import Recipe
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.service.recipe import RecipeStatistics
from keepsake.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_date_str_optional,
)
from keepsake.view.view.util import check
from keepsake.view.view.views.header import header
from keepsake.view.view.views.statistics import counts_report, statistics_report


def recipes_report(
    report_name: str,
    recipes: list[Recipe],
    columns: list[str] = ["id", "title", "category", "favorite", "ingredients", "cooked"],
) -> None:
    header(report_name)

    recipes_table = Table(box=box.SIMPLE)
    for column in columns:
        recipes_table.add_column(column)

    for recipe in recipes:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(
                        RecordKind.RECIPE, cast(EntityId, recipe["id"])
                    )
                )
            elif column == "title":
                column_value = recipe["title"]
            elif column == "category":
                column_value = str(recipe["category"])
            elif column == "favorite":
                column_value = check(recipe["favorite"])
            elif column == "ingredients":
                column_value = str(len(recipe["ingredients"]))
            elif column == "cooked":
                column_value = (
                    datetime_to_display_local_date_str_optional(recipe["cooked"]) or ""
                )
            row.append(column_value)
        recipes_table.add_row(*row)

    console = Console()
    console.print(recipes_table)


def single_recipe_report(recipe: Recipe, report_name: str = "recipe") -> None:
    header(report_name)

    recipe_table = Table(box=box.SIMPLE)
    recipe_table.add_column("property")
    recipe_table.add_column("value")

    recipe_table.add_row(
        "id",
        str(ID_MAP_REPO.associate_id(RecordKind.RECIPE, cast(EntityId, recipe["id"]))),
    )
    recipe_table.add_row("title", recipe["title"])
    recipe_table.add_row("category", str(recipe["category"]))
    recipe_table.add_row("favorite", check(recipe["favorite"]))
    recipe_table.add_row(
        "cooked", datetime_to_display_local_date_str_optional(recipe["cooked"]) or ""
    )
    recipe_table.add_row("created", datetime_to_display_local_date_str(recipe["created"]))

    console = Console()
    console.print(recipe_table)

    if len(recipe["ingredients"]) > 0:
        console.print(
            Panel(
                "\n".join(f"- {ingredient}" for ingredient in recipe["ingredients"]),
                title="Ingredients",
                border_style="green3",
            )
        )
    if recipe["instructions"] is not None:
        console.print(
            Panel(recipe["instructions"], title="Instructions", border_style="blue")
        )


def recipe_statistics_report(statistics: RecipeStatistics) -> None:
    statistics_report(
        "recipes",
        [
            ("total recipes", str(statistics["total"])),
            (
                "favorites",
                f"{statistics['favorites']} ({statistics['favorite_percentage']}%)",
            ),
            ("cooked this week", str(statistics["cooked_this_week"])),
            ("never cooked", str(statistics["never_cooked"])),
        ],
    )
    counts_report("per category", statistics["per_category"])
