# SPDX-License-Identifier: MIT

from keepsake.model.recipe import Recipe, RecipeCategory
from keepsake.time import now_utc


def get_recipe_template() -> Recipe:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "title": "",
        "category": RecipeCategory.DINNER,
        "ingredients": [],
        "instructions": None,
        "favorite": False,
        "cooked": None,
    }
