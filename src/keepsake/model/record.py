# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from keepsake.model.entity_id import EntityId
from keepsake.model.record_kind import RecordKind


class Record(TypedDict):
    id: Optional[EntityId]
    created: pendulum.DateTime
    updated: pendulum.DateTime


class RecordAction(StrEnum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    CLEARED = "cleared"


class RecordEvent(TypedDict):
    kind: RecordKind
    action: RecordAction
    ids: list[EntityId]
