# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

import pendulum

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId
from keepsake.model.recipe import Recipe, RecipeCategory
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import (
    LiteralString,
    Persistence,
    YamlFilePersistence,
)
from keepsake.repository.record import RecordRepository


class RecipeRepository(RecordRepository[Recipe]):
    kind = RecordKind.RECIPE

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.RECIPE.collection_key, configuration.RECIPES_FILE
            )
        )

    def _convert_for_serialization(self, record: Recipe) -> dict[str, Any]:
        serializable_recipe = super()._convert_for_serialization(record)
        serializable_recipe["category"] = str(serializable_recipe["category"])
        serializable_recipe["cooked"] = time.datetime_to_iso_str_optional(
            serializable_recipe["cooked"]
        )
        if serializable_recipe["instructions"] is not None:
            serializable_recipe["instructions"] = LiteralString(
                serializable_recipe["instructions"]
            )
        return serializable_recipe

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Recipe:
        deserializable_recipe = super()._convert_for_deserialization(record)
        deserializable_recipe["category"] = RecipeCategory(
            deserializable_recipe["category"]
        )
        deserializable_recipe["cooked"] = time.datetime_from_str_optional(
            cast(Optional[str], deserializable_recipe["cooked"])
        )
        return deserializable_recipe

    def toggle_favorite(self, id: EntityId) -> Optional[bool]:
        """Flip the favorite flag; returns the new value or None if missing."""
        recipe = self.get_record(id)
        if recipe is None:
            return None
        recipe["favorite"] = not recipe["favorite"]
        self.modify_record(recipe)
        return recipe["favorite"]

    def mark_cooked(
        self, id: EntityId, cooked: Optional[pendulum.DateTime] = None
    ) -> bool:
        recipe = self.get_record(id)
        if recipe is None:
            return False
        recipe["cooked"] = cooked if cooked is not None else time.now_utc()
        return self.modify_record(recipe)


RECIPE_REPO = RecipeRepository()
