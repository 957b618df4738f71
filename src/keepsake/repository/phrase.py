# SPDX-License-Identifier: MIT

import logging
import random
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import pendulum
import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId
from keepsake.model.phrase import DailyState, Phrase
from keepsake.model.record_kind import RecordKind
from keepsake.repository.persistence import Persistence, YamlFilePersistence
from keepsake.repository.record import RecordRepository
from keepsake.template.phrase import (
    DEFAULT_PHRASES,
    get_active_state,
    get_archived_state,
    get_daily_state_template,
    get_phrase_template,
)

logger = logging.getLogger(__name__)


class PhraseRepository(RecordRepository[Phrase]):
    kind = RecordKind.PHRASE

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        super().__init__(
            persistence
            if persistence is not None
            else YamlFilePersistence(
                RecordKind.PHRASE.collection_key, configuration.PHRASES_FILE
            )
        )

    def _convert_for_serialization(self, record: Phrase) -> dict[str, Any]:
        serializable_phrase = super()._convert_for_serialization(record)
        state = serializable_phrase["state"]
        if state["status"] == "archived":
            state["archived"] = time.datetime_to_iso_str(state["archived"])
        return serializable_phrase

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Phrase:
        deserializable_phrase = super()._convert_for_deserialization(record)
        state = cast(dict[str, Any], deserializable_phrase["state"])
        if state["status"] == "archived":
            state["archived"] = time.datetime_from_str(state["archived"])
        return deserializable_phrase

    def get_active_phrases(self) -> list[Phrase]:
        return [
            phrase
            for phrase in self.get_all_records()
            if phrase["state"]["status"] == "active"
        ]

    def get_archived_phrases(self) -> list[Phrase]:
        return [
            phrase
            for phrase in self.get_all_records()
            if phrase["state"]["status"] == "archived"
        ]

    def archive_phrase(self, id: EntityId) -> bool:
        return self._replace_state(id, get_archived_state())

    def unarchive_phrase(self, id: EntityId) -> bool:
        return self._replace_state(id, get_active_state())

    def clear_archive(self) -> int:
        """Delete every archived phrase."""
        return self.delete_records(
            cast(EntityId, phrase["id"]) for phrase in self.get_archived_phrases()
        )

    def restore_default_phrases(self) -> list[EntityId]:
        """Add the built-in phrases that are not present (as text) any more."""
        existing_texts = {phrase["text"] for phrase in self.records}
        restored_ids = []
        for text in DEFAULT_PHRASES:
            if text in existing_texts:
                continue
            phrase = get_phrase_template()
            phrase["text"] = text
            phrase["custom"] = False
            restored_ids.append(self.save_new_record(phrase))
        return restored_ids


class DailyStateRepository:
    """Single document holding today's evening ritual progress."""

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._daily_state: Optional[DailyState] = None
        self.data_path = data_path

    @property
    def path(self) -> Path:
        return configuration.data_file_path(configuration.DAILY_STATE_FILE, self.data_path)

    @property
    def daily_state(self) -> DailyState:
        if self._daily_state is None:
            self.__load_data()
        if self._daily_state is None:
            raise ValueError()
        return self._daily_state

    def __load_data(self) -> None:
        self._daily_state = get_daily_state_template()
        raw_state: Any = None
        if self.path.is_file():
            try:
                raw_state = load(self.path.read_text(), Loader=Loader)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("could not load daily state from %s: %s", self.path, e)
        if not isinstance(raw_state, dict) or not isinstance(
            raw_state.get("daily_state"), dict
        ):
            return

        daily_state = raw_state["daily_state"]
        try:
            missing = [key for key in self._daily_state if key not in daily_state]
            if len(missing) > 0:
                raise KeyError(", ".join(missing))
            daily_state["completed_at"] = time.datetime_from_str_optional(
                daily_state["completed_at"]
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("ignoring unreadable daily state in %s: %r", self.path, e)
            return
        self._daily_state = cast(DailyState, daily_state)

    def __save_data(self) -> None:
        serializable_state = cast(dict[str, Any], deepcopy(self.daily_state))
        serializable_state["completed_at"] = time.datetime_to_iso_str_optional(
            serializable_state["completed_at"]
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                dump({"daily_state": serializable_state}, Dumper=Dumper)
            )
        except (OSError, yaml.YAMLError) as e:
            logger.warning("could not save daily state to %s: %s", self.path, e)

    def get_daily_state(self, now: Optional[pendulum.DateTime] = None) -> DailyState:
        """
        Get today's state, starting a fresh one when the local day has changed.
        """
        today = time.datetime_to_local_date_str(now if now is not None else time.now_utc())
        if self.daily_state["day"] != today:
            self._daily_state = get_daily_state_template(now)
            self.__save_data()
        return deepcopy(self.daily_state)

    def select_random_phrase(
        self,
        phrases: list[Phrase],
        rng: Optional[random.Random] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> Optional[EntityId]:
        """
        Pick tonight's phrase among active phrases, avoiding the current one
        when there is a choice.
        """
        self.get_daily_state(now)
        candidates = [
            phrase for phrase in phrases if phrase["state"]["status"] == "active"
        ]
        if len(candidates) > 1:
            candidates = [
                phrase
                for phrase in candidates
                if phrase["id"] != self.daily_state["current_phrase_id"]
            ]
        if len(candidates) == 0:
            return None

        chosen = (rng or random.Random()).choice(candidates)
        self.daily_state["current_phrase_id"] = chosen["id"]
        self.__save_data()
        return chosen["id"]

    def complete_practice(self, now: Optional[pendulum.DateTime] = None) -> DailyState:
        self.get_daily_state(now)
        self.daily_state["completed"] = True
        self.daily_state["completed_at"] = now if now is not None else time.now_utc()
        self.__save_data()
        return deepcopy(self.daily_state)

    def toggle_light(self, now: Optional[pendulum.DateTime] = None) -> bool:
        self.get_daily_state(now)
        self.daily_state["light_off"] = not self.daily_state["light_off"]
        self.__save_data()
        return self.daily_state["light_off"]


PHRASE_REPO = PhraseRepository()
DAILY_STATE_REPO = DailyStateRepository()
