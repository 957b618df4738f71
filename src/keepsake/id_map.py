# SPDX-License-Identifier: MIT

from keepsake import state as app_state
from keepsake.repository.id_map import ID_MAP_REPO


def clear_id_map_if_required() -> None:
    """Start short ids from 1 again before a listing, unless disabled."""
    if app_state.renumber_short_ids():
        ID_MAP_REPO.clear_ids()
