# SPDX-License-Identifier: MIT

import random
from pathlib import Path

import pendulum
import pytest
import yaml

from keepsake.model.entity_id import EntityId
from keepsake.model.idea import Idea, IdeaCategory
from keepsake.model.record_kind import RecordKind
from keepsake.repository.idea import IdeaRepository
from keepsake.repository.persistence import MemoryPersistence, YamlFilePersistence
from keepsake.service.idea import (
    filter_ideas,
    idea_statistics,
    ideas_for_date,
    memories,
    random_idea,
    upcoming_ideas,
)
from keepsake.template.idea import get_completed_state, get_idea_template


@pytest.fixture
def idea_repo() -> IdeaRepository:
    return IdeaRepository(MemoryPersistence())


def add_idea(
    repo: IdeaRepository, title: str, category: IdeaCategory = IdeaCategory.DATE
) -> EntityId:
    idea = get_idea_template()
    idea["title"] = title
    idea["category"] = category
    return repo.save_new_record(idea)


def make_idea(
    title: str,
    scheduled: pendulum.DateTime | None = None,
    category: IdeaCategory = IdeaCategory.DATE,
) -> Idea:
    idea = get_idea_template()
    idea["title"] = title
    idea["scheduled"] = scheduled
    idea["category"] = category
    return idea


def test_set_memory_completes_planned_idea(idea_repo: IdeaRepository) -> None:
    id = add_idea(idea_repo, "Picnic")

    assert idea_repo.set_memory(id, "Sunny, ants everywhere")

    idea = idea_repo.get_record(id)
    assert idea is not None
    assert idea["state"]["status"] == "completed"
    assert idea["state"]["memory"] == "Sunny, ants everywhere"


def test_set_memory_keeps_completion_date(idea_repo: IdeaRepository) -> None:
    id = add_idea(idea_repo, "Picnic")
    idea_repo.complete_idea(id)
    completed = idea_repo.get_record(id)
    assert completed is not None and completed["state"]["status"] == "completed"

    idea_repo.set_memory(id, "later")

    idea = idea_repo.get_record(id)
    assert idea is not None and idea["state"]["status"] == "completed"
    assert idea["state"]["completed"] == completed["state"]["completed"]
    assert idea["state"]["memory"] == "later"


def test_plan_idea_drops_memory(idea_repo: IdeaRepository) -> None:
    id = add_idea(idea_repo, "Picnic")
    idea_repo.complete_idea(id, "nice")

    assert idea_repo.plan_idea(id)

    idea = idea_repo.get_record(id)
    assert idea is not None
    assert idea["state"] == {"status": "planned"}


def test_unknown_idea_transitions_fail(idea_repo: IdeaRepository) -> None:
    assert not idea_repo.complete_idea("missing")
    assert not idea_repo.set_memory("missing", "memory")
    assert not idea_repo.plan_idea("missing")


def test_category_is_stored_as_plain_string(tmp_path: Path) -> None:
    repo = IdeaRepository(
        YamlFilePersistence(RecordKind.IDEA.collection_key, "ideas.yaml", tmp_path)
    )
    id = add_idea(repo, "Road trip", IdeaCategory.TRIP)
    repo.set_memory(id, "first line\nsecond line")

    raw = yaml.safe_load((tmp_path / "ideas.yaml").read_text())
    assert raw["ideas"][0]["category"] == "trip"
    assert raw["ideas"][0]["state"]["memory"] == "first line\nsecond line"

    reloaded = IdeaRepository(
        YamlFilePersistence(RecordKind.IDEA.collection_key, "ideas.yaml", tmp_path)
    ).get_record(id)
    assert reloaded is not None
    assert reloaded["category"] is IdeaCategory.TRIP


def test_ideas_for_date_and_upcoming(now: pendulum.DateTime) -> None:
    earlier_today = make_idea("breakfast", now.start_of("day").add(hours=8))
    tonight = make_idea("dinner", now.add(hours=8))
    tomorrow = make_idea("hike", now.add(days=1))
    yesterday = make_idea("museum", now.subtract(days=1))
    unscheduled = make_idea("someday")
    done = make_idea("concert", now.add(days=2))
    done["state"] = get_completed_state()
    ideas = [tomorrow, tonight, yesterday, unscheduled, done, earlier_today]

    assert [idea["title"] for idea in ideas_for_date(ideas, "today", now)] == [
        "breakfast",
        "dinner",
    ]
    assert [idea["title"] for idea in ideas_for_date(ideas, "2026-06-16", now)] == [
        "hike"
    ]
    assert [idea["title"] for idea in upcoming_ideas(ideas, now=now)] == [
        "breakfast",
        "dinner",
        "hike",
    ]
    assert len(upcoming_ideas(ideas, limit=1, now=now)) == 1


def test_memories_and_category_filter(now: pendulum.DateTime) -> None:
    old = make_idea("old", category=IdeaCategory.TRIP)
    old["state"] = {
        "status": "completed",
        "completed": now.subtract(months=2),
        "memory": "long ago",
    }
    recent = make_idea("recent")
    recent["state"] = {"status": "completed", "completed": now, "memory": None}
    planned = make_idea("planned", category=IdeaCategory.TRIP)
    ideas = [old, planned, recent]

    assert [idea["title"] for idea in memories(ideas, now=now)] == ["recent", "old"]
    assert [idea["title"] for idea in memories(ideas, query="ago", now=now)] == ["old"]
    assert [
        idea["title"] for idea in filter_ideas(ideas, category=IdeaCategory.TRIP)
    ] == ["old", "planned"]


def test_random_idea_only_picks_planned() -> None:
    planned = make_idea("planned", category=IdeaCategory.HOME)
    done = make_idea("done", category=IdeaCategory.HOME)
    done["state"] = get_completed_state()
    rng = random.Random(1)

    for _ in range(5):
        idea = random_idea([planned, done], IdeaCategory.HOME, rng)
        assert idea is not None
        assert idea["title"] == "planned"
    assert random_idea([done]) is None
    assert random_idea([planned], IdeaCategory.TRIP) is None


def test_idea_statistics(now: pendulum.DateTime) -> None:
    short = make_idea("short", category=IdeaCategory.TRIP)
    short["state"] = {"status": "completed", "completed": now, "memory": "ok"}
    long = make_idea("long")
    long["state"] = {
        "status": "completed",
        "completed": now,
        "memory": "a much longer memory",
    }
    upcoming = make_idea("upcoming", now.add(days=3))
    ideas = [short, long, upcoming]

    statistics = idea_statistics(ideas, now)

    assert statistics["total"] == 3
    assert statistics["planned"] == 1
    assert statistics["completed"] == 2
    assert statistics["completed_percentage"] == 67
    assert statistics["completed_this_month"] == 2
    assert statistics["per_category"] == {"trip": 1, "date": 2}
    assert statistics["busiest_day"] == ("2026-06-15", 2)
    longest = statistics["longest_memory"]
    assert longest is not None and longest["title"] == "long"
    assert statistics["upcoming"] == 1
