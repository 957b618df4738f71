# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    """Random uuid4 string; the store rejects ids it has issued before."""
    return str(uuid.uuid4())
