# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from keepsake.model.entity_id import EntityId
from keepsake.model.record import Record

PhraseStatus = Literal["active", "archived"]


class Active(TypedDict):
    status: Literal["active"]


class Archived(TypedDict):
    status: Literal["archived"]
    archived: pendulum.DateTime


PhraseState = Active | Archived


class Phrase(Record):
    text: str
    custom: bool  # False for the built-in evening phrases
    state: PhraseState


class DailyState(TypedDict):
    """Evening ritual progress, reset when the local day changes."""

    day: str  # local YYYY-MM-DD
    current_phrase_id: Optional[EntityId]
    completed: bool
    completed_at: Optional[pendulum.DateTime]
    light_off: bool
