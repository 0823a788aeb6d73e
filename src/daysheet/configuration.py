# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "daysheet"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

SHEET_SUFFIX = ".md"

DEFAULT_START = 8
DEFAULT_END = 17
DEFAULT_TARGET_HOURS = 8.0
DEFAULT_CATEGORIES = ["work"]


class Configuration(TypedDict):
    data_path: Optional[str]
    default_start: int
    default_end: int
    target_hours: float
    categories: list[str]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "default_start": DEFAULT_START,
        "default_end": DEFAULT_END,
        "target_hours": DEFAULT_TARGET_HOURS,
        "categories": list(DEFAULT_CATEGORIES),
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH dynamically.

    This must be called after the config file exists and before any
    sheet paths are resolved.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if not isinstance(config, dict):
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(str(data_path_setting)).expanduser()
