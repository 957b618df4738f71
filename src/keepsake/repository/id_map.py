# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keepsake import configuration
from keepsake.model.entity_id import EntityId
from keepsake.model.id_map import IdMap, IdMapMapping
from keepsake.model.record_kind import RecordKind
from keepsake.template.id_map import get_id_map_mapping_template, get_id_map_template

logger = logging.getLogger(__name__)


class IdMapRepository:
    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._id_map: Optional[IdMap] = None
        self.data_path = data_path

    @property
    def path(self) -> Path:
        return configuration.data_file_path(configuration.ID_MAP_FILE, self.data_path)

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        self._id_map = get_id_map_template()
        if not self.path.is_file():
            return
        try:
            loaded = load(self.path.read_text(), Loader=Loader)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("could not load id map from %s: %s", self.path, e)
            return
        if isinstance(loaded, dict):
            self._id_map.update(loaded)

    def __save_data(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(self.id_map, Dumper=Dumper))
        except (OSError, yaml.YAMLError) as e:
            logger.warning("could not save id map to %s: %s", self.path, e)

    def __mapping(self, kind: RecordKind) -> IdMapMapping:
        if kind.value not in self.id_map:
            self.id_map[kind.value] = get_id_map_mapping_template()
        return self.id_map[kind.value]

    def clear_ids(self) -> None:
        self._id_map = get_id_map_template()
        self.__save_data()

    def associate_id(self, kind: RecordKind, entity_id: EntityId) -> int:
        """
        Get the short id shown for an entity, creating one if needed
        """
        mapping = self.__mapping(kind)
        if entity_id in mapping["real_to_synthetic"]:
            return mapping["real_to_synthetic"][entity_id]

        next_id = len(mapping["real_to_synthetic"]) + 1
        mapping["real_to_synthetic"][entity_id] = next_id
        mapping["synthetic_to_real"][next_id] = entity_id
        self.__save_data()

        return next_id

    def get_real_id(self, kind: RecordKind, synthetic_id: int) -> Optional[EntityId]:
        """
        Get the entity id behind a short id, or None if it was never handed out
        """
        return self.__mapping(kind)["synthetic_to_real"].get(synthetic_id)


ID_MAP_REPO = IdMapRepository()
