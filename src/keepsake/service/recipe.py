# SPDX-License-Identifier: MIT

import random
from typing import Optional, TypedDict

import pendulum

from keepsake.model.filter import Filters
from keepsake.model.recipe import Recipe, RecipeCategory
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.service.statistics import count_by, count_in_window, percentage
from keepsake.time import DateWindow, datetime_to_local_date_str, now_utc


class RecipeStatistics(TypedDict):
    total: int
    per_category: dict[str, int]
    favorites: int
    favorite_percentage: int
    cooked_this_week: int
    never_cooked: int


def filter_recipes(
    recipes: list[Recipe],
    category: Optional[RecipeCategory] = None,
    favorites_only: bool = False,
    query: Optional[str] = None,
) -> list[Recipe]:
    filters: list[Filters] = []
    if category is not None:
        filters.append(
            {
                "filter_type": FilterType.STR,
                "property": "category",
                "filter": f"equals {category.value}",
            }
        )
    if favorites_only:
        filters.append(
            {"filter_type": FilterType.STR, "property": "favorite", "filter": "equals True"}
        )
    if query is not None:
        filters.append(
            {
                "filter_type": FilterType.SEARCH,
                "properties": ["title", "ingredients", "instructions"],
                "filter": query,
            }
        )
    return apply_filters(recipes, filters)


def recipe_of_the_day(
    recipes: list[Recipe],
    category: Optional[RecipeCategory] = None,
    rng: Optional[random.Random] = None,
    now: Optional[pendulum.DateTime] = None,
) -> Optional[Recipe]:
    """
    Pick a recipe for today.

    Without an explicit rng the pick is seeded by the local date, so asking
    twice on the same day gives the same recipe.
    """
    candidates = filter_recipes(recipes, category)
    if len(candidates) == 0:
        return None
    if rng is None:
        rng = random.Random(
            datetime_to_local_date_str(now if now is not None else now_utc())
        )
    return rng.choice(candidates)


def recipe_statistics(
    recipes: list[Recipe], now: Optional[pendulum.DateTime] = None
) -> RecipeStatistics:
    favorites = len([recipe for recipe in recipes if recipe["favorite"]])
    return {
        "total": len(recipes),
        "per_category": count_by(recipes, "category"),
        "favorites": favorites,
        "favorite_percentage": percentage(favorites, len(recipes)),
        "cooked_this_week": count_in_window(
            recipes, "cooked", DateWindow.THIS_WEEK, now
        ),
        "never_cooked": len([recipe for recipe in recipes if recipe["cooked"] is None]),
    }
