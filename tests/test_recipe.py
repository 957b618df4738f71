# SPDX-License-Identifier: MIT

import random

import pendulum
import pytest

from keepsake.model.recipe import Recipe, RecipeCategory
from keepsake.repository.persistence import MemoryPersistence
from keepsake.repository.recipe import RecipeRepository
from keepsake.service.recipe import (
    filter_recipes,
    recipe_of_the_day,
    recipe_statistics,
)
from keepsake.template.recipe import get_recipe_template


@pytest.fixture
def recipe_repo() -> RecipeRepository:
    return RecipeRepository(MemoryPersistence())


def make_recipe(
    title: str,
    category: RecipeCategory = RecipeCategory.DINNER,
    ingredients: list[str] | None = None,
) -> Recipe:
    recipe = get_recipe_template()
    recipe["title"] = title
    recipe["category"] = category
    recipe["ingredients"] = ingredients or []
    return recipe


def test_toggle_favorite(recipe_repo: RecipeRepository) -> None:
    id = recipe_repo.save_new_record(make_recipe("Soup"))

    assert recipe_repo.toggle_favorite(id) is True
    assert recipe_repo.toggle_favorite(id) is False
    assert recipe_repo.toggle_favorite("missing") is None


def test_mark_cooked(recipe_repo: RecipeRepository, now: pendulum.DateTime) -> None:
    id = recipe_repo.save_new_record(make_recipe("Soup"))

    assert recipe_repo.mark_cooked(id, now)

    recipe = recipe_repo.get_record(id)
    assert recipe is not None
    assert recipe["cooked"] == now
    assert not recipe_repo.mark_cooked("missing")


def test_filter_recipes() -> None:
    pancakes = make_recipe("Pancakes", RecipeCategory.BREAKFAST, ["flour", "Eggs"])
    pancakes["favorite"] = True
    omelette = make_recipe("Omelette", RecipeCategory.BREAKFAST, ["eggs"])
    soup = make_recipe("Soup", ingredients=["leek"])
    recipes = [pancakes, omelette, soup]

    assert [
        recipe["title"] for recipe in filter_recipes(recipes, RecipeCategory.BREAKFAST)
    ] == ["Pancakes", "Omelette"]
    assert [recipe["title"] for recipe in filter_recipes(recipes, query="egg")] == [
        "Pancakes",
        "Omelette",
    ]
    assert [
        recipe["title"] for recipe in filter_recipes(recipes, favorites_only=True)
    ] == ["Pancakes"]


def test_recipe_of_the_day_is_stable_for_a_day(now: pendulum.DateTime) -> None:
    recipes = [make_recipe(f"recipe {index}") for index in range(10)]

    first = recipe_of_the_day(recipes, now=now)
    later = recipe_of_the_day(recipes, now=now.add(hours=6))

    assert first is not None and later is not None
    assert first["title"] == later["title"]


def test_recipe_of_the_day_respects_category() -> None:
    recipes = [
        make_recipe("Soup"),
        make_recipe("Cake", RecipeCategory.DESSERT),
    ]

    recipe = recipe_of_the_day(recipes, RecipeCategory.DESSERT, random.Random(3))

    assert recipe is not None and recipe["title"] == "Cake"
    assert recipe_of_the_day(recipes, RecipeCategory.SNACK) is None
    assert recipe_of_the_day([]) is None


def test_recipe_statistics(now: pendulum.DateTime) -> None:
    cooked_today = make_recipe("Soup")
    cooked_today["cooked"] = now
    cooked_long_ago = make_recipe("Cake", RecipeCategory.DESSERT)
    cooked_long_ago["cooked"] = now.subtract(months=2)
    cooked_long_ago["favorite"] = True
    never = make_recipe("Stew")

    statistics = recipe_statistics([cooked_today, cooked_long_ago, never], now)

    assert statistics["total"] == 3
    assert statistics["per_category"] == {"dinner": 2, "dessert": 1}
    assert statistics["favorites"] == 1
    assert statistics["favorite_percentage"] == 33
    assert statistics["cooked_this_week"] == 1
    assert statistics["never_cooked"] == 1
