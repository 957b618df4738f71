# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from keepsake.model.phrase import Active, Archived, DailyState, Phrase
from keepsake.time import datetime_to_local_date_str, now_utc

DEFAULT_PHRASES = [
    "Today I did enough.",
    "I let go of what I cannot change.",
    "I am grateful for one small thing from today.",
    "My body deserves rest.",
    "Tomorrow is a fresh page.",
    "I forgive myself for today's mistakes.",
    "I am safe, calm and at home.",
    "Every breath slows me down a little more.",
    "I release the noise of the day.",
    "I welcome quiet and sleep.",
]


def get_phrase_template() -> Phrase:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "text": "",
        "custom": True,
        "state": get_active_state(),
    }


def get_active_state() -> Active:
    return {"status": "active"}


def get_archived_state() -> Archived:
    return {"status": "archived", "archived": now_utc()}


def get_daily_state_template(now: Optional[pendulum.DateTime] = None) -> DailyState:
    return {
        "day": datetime_to_local_date_str(now if now is not None else now_utc()),
        "current_phrase_id": None,
        "completed": False,
        "completed_at": None,
        "light_off": False,
    }
