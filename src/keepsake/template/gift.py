# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from keepsake.model.gift import Gift, Given, Planned, Purchased
from keepsake.time import now_utc


def get_gift_template() -> Gift:
    return {
        "id": None,
        "created": now_utc(),
        "updated": now_utc(),
        "title": "",
        "person": None,
        "category": None,
        "note": None,
        "budget": None,
        "state": get_planned_state(),
    }


def get_planned_state() -> Planned:
    return {"status": "planned"}


def get_purchased_state() -> Purchased:
    return {"status": "purchased", "purchased": now_utc()}


def get_given_state(purchased: Optional[pendulum.DateTime] = None) -> Given:
    return {"status": "given", "purchased": purchased, "given": now_utc()}
