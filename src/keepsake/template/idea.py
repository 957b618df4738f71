# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.idea import Completed, Idea, IdeaCategory, Planned
from keepsake.time import now_utc


def get_idea_template() -> Idea:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "title": "",
        "description": None,
        "category": IdeaCategory.DATE,
        "scheduled": None,
        "state": get_planned_state(),
    }


def get_planned_state() -> Planned:
    return {"status": "planned"}


def get_completed_state(memory: Optional[str] = None) -> Completed:
    return {"status": "completed", "completed": now_utc(), "memory": memory}
