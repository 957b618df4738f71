# SPDX-License-Identifier: MIT

"""Shared pytest fixtures: isolated data/config paths and a fixed clock."""

from pathlib import Path
from typing import Iterator

import pendulum
import pytest

from keepsake import configuration
from keepsake import state as app_state
from keepsake.repository.book import BOOK_REPO
from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.repository.gift import GIFT_REPO
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.repository.idea import IDEA_REPO
from keepsake.repository.note import NOTE_REPO
from keepsake.repository.phrase import DAILY_STATE_REPO, PHRASE_REPO
from keepsake.repository.recipe import RECIPE_REPO
from keepsake.view import state as view_state


@pytest.fixture(autouse=True)
def utc_local_timezone() -> Iterator[None]:
    """Make "local" calendar windows deterministic."""
    pendulum.set_local_timezone(pendulum.timezone("UTC"))
    yield
    pendulum.set_local_timezone()


@pytest.fixture
def now() -> pendulum.DateTime:
    return pendulum.datetime(2026, 6, 15, 12, 0, 0, tz="UTC")


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_path = tmp_path / "data"
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    return data_path


@pytest.fixture
def fresh_app(data_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every module level repository at an empty temporary data path."""
    for repository in (
        BOOK_REPO,
        PHRASE_REPO,
        IDEA_REPO,
        GIFT_REPO,
        RECIPE_REPO,
        NOTE_REPO,
    ):
        monkeypatch.setattr(repository, "_records", None)
        monkeypatch.setattr(repository, "_issued_ids", set())
        monkeypatch.setattr(repository, "_listeners", [])
    monkeypatch.setattr(DAILY_STATE_REPO, "_daily_state", None)
    monkeypatch.setattr(ID_MAP_REPO, "_id_map", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)

    view_state.set_show_header(True)
    app_state.set_renumber_short_ids(True)
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
