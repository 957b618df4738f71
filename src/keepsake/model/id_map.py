# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

from keepsake.model.entity_id import EntityId


class IdMapMapping(TypedDict):
    """
    Short ids handed out in listings, per record kind.

    synthetic_to_real[7] is the EntityId shown as "7" in the last listing.
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]


# keyed by RecordKind value
IdMap: TypeAlias = dict[str, IdMapMapping]
