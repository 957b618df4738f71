# SPDX-License-Identifier: MIT

from typing import Optional

import pytest

from keepsake.model.entity_id import EntityId
from keepsake.model.gift import Gift
from keepsake.repository.gift import GiftRepository
from keepsake.repository.persistence import MemoryPersistence
from keepsake.service.gift import filter_gifts, gift_statistics
from keepsake.template.gift import get_gift_template


@pytest.fixture
def gift_repo() -> GiftRepository:
    return GiftRepository(MemoryPersistence())


def make_gift(
    title: str, person: Optional[str] = None, budget: Optional[float] = None
) -> Gift:
    gift = get_gift_template()
    gift["title"] = title
    gift["person"] = person
    gift["budget"] = budget
    return gift


def add_gift(repo: GiftRepository, title: str) -> EntityId:
    return repo.save_new_record(make_gift(title))


def test_mark_given_keeps_purchase_date(gift_repo: GiftRepository) -> None:
    id = add_gift(gift_repo, "Scarf")
    gift_repo.mark_purchased(id)
    purchased = gift_repo.get_record(id)
    assert purchased is not None and purchased["state"]["status"] == "purchased"

    assert gift_repo.mark_given(id)

    gift = gift_repo.get_record(id)
    assert gift is not None and gift["state"]["status"] == "given"
    assert gift["state"]["purchased"] == purchased["state"]["purchased"]


def test_mark_given_from_planned_has_no_purchase_date(
    gift_repo: GiftRepository,
) -> None:
    id = add_gift(gift_repo, "Scarf")

    assert gift_repo.mark_given(id)

    gift = gift_repo.get_record(id)
    assert gift is not None and gift["state"]["status"] == "given"
    assert gift["state"]["purchased"] is None


def test_mark_planned_resets_state(gift_repo: GiftRepository) -> None:
    id = add_gift(gift_repo, "Scarf")
    gift_repo.mark_purchased(id)

    assert gift_repo.mark_planned(id)

    gift = gift_repo.get_record(id)
    assert gift is not None
    assert gift["state"] == {"status": "planned"}


def test_unknown_gift_transitions_fail(gift_repo: GiftRepository) -> None:
    assert not gift_repo.mark_purchased("missing")
    assert not gift_repo.mark_given("missing")
    assert not gift_repo.mark_planned("missing")


def test_filter_gifts_by_person_ignores_case() -> None:
    gifts = [
        make_gift("Scarf", "Anna"),
        make_gift("Book", "anna"),
        make_gift("Tea", "Ben"),
        make_gift("Mystery"),
    ]

    assert [gift["title"] for gift in filter_gifts(gifts, person="ANNA")] == [
        "Scarf",
        "Book",
    ]
    assert [gift["title"] for gift in filter_gifts(gifts, query="ben")] == ["Tea"]
    assert len(filter_gifts(gifts, status="planned")) == 4


def test_gift_statistics() -> None:
    planned = make_gift("Scarf", "Anna", 30.0)
    purchased = make_gift("Tea", "Ben", 12.5)
    purchased["state"] = {"status": "purchased", "purchased": purchased["created"]}
    given = make_gift("Book", "Anna")
    given["state"] = {"status": "given", "purchased": None, "given": given["created"]}

    statistics = gift_statistics([planned, purchased, given])

    assert statistics["total"] == 3
    assert statistics["planned"] == 1
    assert statistics["purchased"] == 1
    assert statistics["given"] == 1
    assert statistics["given_percentage"] == 33
    assert statistics["per_person"] == {"Anna": 2, "Ben": 1}
    assert statistics["total_budget"] == 42.5
    assert statistics["open_budget"] == 30.0


def test_gift_statistics_empty() -> None:
    statistics = gift_statistics([])

    assert statistics["total"] == 0
    assert statistics["given_percentage"] == 0
    assert statistics["total_budget"] == 0
