# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from keepsake.model.record import Record

GiftStatus = Literal["planned", "purchased", "given"]

GIFT_STATUSES: tuple[GiftStatus, ...] = ("planned", "purchased", "given")


class Planned(TypedDict):
    status: Literal["planned"]


class Purchased(TypedDict):
    status: Literal["purchased"]
    purchased: pendulum.DateTime


class Given(TypedDict):
    status: Literal["given"]
    purchased: Optional[pendulum.DateTime]
    given: pendulum.DateTime


GiftState = Planned | Purchased | Given


class Gift(Record):
    title: str
    person: Optional[str]
    category: Optional[str]
    note: Optional[str]
    budget: Optional[float]
    state: GiftState
