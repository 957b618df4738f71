# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Literal, Optional, TypedDict

import pendulum

from keepsake.model.record import Record

IdeaStatus = Literal["planned", "completed"]


class IdeaCategory(StrEnum):
    DATE = "date"
    TRIP = "trip"
    HOME = "home"
    SURPRISE = "surprise"
    OTHER = "other"


class Planned(TypedDict):
    status: Literal["planned"]


class Completed(TypedDict):
    status: Literal["completed"]
    completed: pendulum.DateTime
    memory: Optional[str]


IdeaState = Planned | Completed


class Idea(Record):
    title: str
    description: Optional[str]
    category: IdeaCategory
    scheduled: Optional[pendulum.DateTime]
    state: IdeaState
