"""scoped-config: Scoped key/value configuration for plugin hosts.

This library resolves a logical scope to a JSON file and exposes get/set/delete
against a shared, cached store for that file:
- app, plugin, global (``<roaming>/configurations/*.json``)
- library (``<library>/library.config.json``)
- item (``item.config.json`` beside the item's file)

Keys can be namespaced by the active plugin's identity with Flag.PLUGIN_ONLY,
so plugins sharing an app or global store don't collide.

Public API:
    config: Factory returning a ScopedConfig handle
    ScopedConfig: Configuration handle with get/set/delete
    Scope, Flag: Enums for scopes and handle flags
    HostContext: Host-supplied roaming root, plugin identity and library path
    JsonFileStore, StoreRegistry: Backing store and its per-path cache
    ConfigError and subclasses: Exception types

Example:
    ```python
    from pathlib import Path
    from scoped_config import Flag, HostContext, config

    context = HostContext(roaming_path=Path.home() / ".myhost", plugin_id="my-plugin")

    prefs = config("global", [Flag.PLUGIN_ONLY], context=context)
    prefs.set("theme", "dark")  # stored as "my-plugin::theme"
    prefs.get("theme")
    ```
"""

from .accessor import KEY_SEPARATOR
from .accessor import ScopedConfig
from .accessor import config
from .accessor import resolve_store_path
from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .exceptions import InvalidFlagCombinationError
from .exceptions import MissingItemContextError
from .exceptions import MissingLibraryContextError
from .exceptions import MissingPluginContextError
from .models import Flag
from .models import HostContext
from .models import Scope
from .store import JsonFileStore
from .store import StoreRegistry
from .store import default_registry

__version__ = "0.1.0"

__all__ = [
    "config",
    "ScopedConfig",
    "resolve_store_path",
    "KEY_SEPARATOR",
    "Scope",
    "Flag",
    "HostContext",
    "JsonFileStore",
    "StoreRegistry",
    "default_registry",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidFlagCombinationError",
    "MissingPluginContextError",
    "MissingItemContextError",
    "MissingLibraryContextError",
]
