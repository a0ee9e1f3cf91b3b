"""Data models for scoped-config."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

APP_CONFIG_FILE = "appConfig.json"
PLUGIN_CONFIG_FILE = "pluginConfig.json"
GLOBAL_CONFIG_FILE = "globalConfig.json"
LIBRARY_CONFIG_FILE = "library.config.json"
ITEM_CONFIG_FILE = "item.config.json"

ROAMING_PATH_ENV = "SCOPED_CONFIG_ROAMING_PATH"
PLUGIN_ID_ENV = "SCOPED_CONFIG_PLUGIN_ID"
LIBRARY_PATH_ENV = "SCOPED_CONFIG_LIBRARY_PATH"


class Scope(Enum):
    """Configuration scope enumeration.

    Determines which JSON file a configuration handle targets.
    """

    APP = "app"
    PLUGIN = "plugin"
    ITEM = "item"
    LIBRARY = "library"
    GLOBAL = "global"

    @classmethod
    def _missing_(cls, value):
        if value == "application":
            return cls.APP
        return None


class Flag(Enum):
    """Modifiers for a configuration handle."""

    PLUGIN_ONLY = "pluginOnly"


class Item(Protocol):
    """Anything with a file on disk, e.g. a library item."""

    file_path: str | Path | None


@dataclass(frozen=True)
class HostContext:
    """Facts supplied by the host application.

    Attributes:
        roaming_path: Roaming configuration root (app/plugin/global files live
            in its ``configurations`` subdirectory)
        plugin_id: Identity of the active plugin, None outside a plugin
        library_path: Root of the active library, None outside a library
    """

    roaming_path: Path
    plugin_id: str | None = None
    library_path: Path | None = None

    @property
    def configurations_dir(self) -> Path:
        return Path(self.roaming_path) / "configurations"

    @classmethod
    def from_env(cls) -> "HostContext":
        """Build a context from ``SCOPED_CONFIG_*`` environment variables.

        Falls back to ``%APPDATA%`` (or ``~/.config``) for the roaming root.
        """
        roaming = os.environ.get(ROAMING_PATH_ENV) or os.environ.get("APPDATA")
        library = os.environ.get(LIBRARY_PATH_ENV)
        return cls(
            roaming_path=Path(roaming) if roaming else Path.home() / ".config",
            plugin_id=os.environ.get(PLUGIN_ID_ENV) or None,
            library_path=Path(library) if library else None,
        )
