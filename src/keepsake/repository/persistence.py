# SPDX-License-Identifier: MIT

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

import yaml
import yaml.representer
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keepsake import configuration

logger = logging.getLogger(__name__)


class LiteralString(str):
    """String subclass to trigger literal block scalar style in YAML."""

    pass


def literal_string_representer(dumper: Any, data: str) -> Any:
    """YAML representer for literal block scalar (|) style."""
    # Convert to str to ensure compatibility with C dumper
    text = str(data)
    if "\n" in text:
        return dumper.represent_scalar("tag:yaml.org,2002:str", text, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", text)


yaml.representer.Representer.add_representer(LiteralString, literal_string_representer)
yaml.representer.SafeRepresenter.add_representer(
    LiteralString, literal_string_representer
)

try:
    from yaml.cyaml import CDumper as CYAMLDumper

    CYAMLDumper.add_representer(LiteralString, literal_string_representer)
except ImportError:
    pass


class Persistence(ABC):
    """Save and load one whole collection of serialized records."""

    @abstractmethod
    def save(self, records: list[dict[str, Any]]) -> bool: ...

    @abstractmethod
    def load(self) -> list[dict[str, Any]]: ...


class YamlFilePersistence(Persistence):
    """
    One YAML file per collection, holding a single top-level key.

    The file path is resolved on every call so a data path configured after
    import is honoured.
    """

    def __init__(
        self, key: str, file_name: str, data_path: Optional[Path] = None
    ) -> None:
        self.key = key
        self.file_name = file_name
        self.data_path = data_path

    @property
    def path(self) -> Path:
        return configuration.data_file_path(self.file_name, self.data_path)

    def save(self, records: list[dict[str, Any]]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump({self.key: records}, Dumper=Dumper))
        except (OSError, yaml.YAMLError) as e:
            logger.warning("could not save %s to %s: %s", self.key, self.path, e)
            return False
        return True

    def load(self) -> list[dict[str, Any]]:
        if not self.path.is_file():
            return []
        try:
            data = load(self.path.read_text(), Loader=Loader)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("could not load %s from %s: %s", self.key, self.path, e)
            return []
        if not isinstance(data, dict) or not isinstance(data.get(self.key), list):
            return []
        return data[self.key]


class MemoryPersistence(Persistence):
    """Keeps the last saved collection in memory."""

    def __init__(self, records: Optional[list[dict[str, Any]]] = None) -> None:
        self._records: list[dict[str, Any]] = deepcopy(records or [])
        self.save_count = 0

    def save(self, records: list[dict[str, Any]]) -> bool:
        self._records = deepcopy(records)
        self.save_count += 1
        return True

    def load(self) -> list[dict[str, Any]]:
        return deepcopy(self._records)
