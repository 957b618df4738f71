# SPDX-License-Identifier: MIT

from keepsake.model.id_map import IdMap, IdMapMapping
from keepsake.model.record_kind import RecordKind


def get_id_map_mapping_template() -> IdMapMapping:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}


def get_id_map_template() -> IdMap:
    return {kind.value: get_id_map_mapping_template() for kind in RecordKind}
