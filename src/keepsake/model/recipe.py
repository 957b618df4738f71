# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional

import pendulum

from keepsake.model.record import Record


class RecipeCategory(StrEnum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    DESSERT = "dessert"
    SNACK = "snack"


class Recipe(Record):
    title: str
    category: RecipeCategory
    ingredients: list[str]
    instructions: Optional[str]
    favorite: bool
    cooked: Optional[pendulum.DateTime]  # last time it was made
