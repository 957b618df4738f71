# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "keepsake"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

BOOKS_FILE = "books.yaml"
PHRASES_FILE = "phrases.yaml"
DAILY_STATE_FILE = "daily_state.yaml"
IDEAS_FILE = "ideas.yaml"
GIFTS_FILE = "gifts.yaml"
RECIPES_FILE = "recipes.yaml"
NOTES_FILE = "notes.yaml"
ID_MAP_FILE = "id_map.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    yearly_reading_goal: int
    monthly_reading_goal: int
    log_level: str
    log_file: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "clear_ids_on_view": True,
        "yearly_reading_goal": 12,
        "monthly_reading_goal": 1,
        "log_level": "WARNING",
        "log_file": None,
    }


def data_file_path(file_name: str, data_path: Optional[Path] = None) -> Path:
    """Resolve a data file against the current DATA_PATH unless one is given."""
    return (data_path if data_path is not None else DATA_PATH) / file_name


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH dynamically.

    This must be called after the config file exists and before any
    repository touches the disk.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
