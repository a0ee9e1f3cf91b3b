"""Scoped configuration handles."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .exceptions import InvalidFlagCombinationError
from .exceptions import MissingItemContextError
from .exceptions import MissingLibraryContextError
from .exceptions import MissingPluginContextError
from .models import APP_CONFIG_FILE
from .models import GLOBAL_CONFIG_FILE
from .models import ITEM_CONFIG_FILE
from .models import LIBRARY_CONFIG_FILE
from .models import PLUGIN_CONFIG_FILE
from .models import Flag
from .models import HostContext
from .models import Item
from .models import Scope
from .store import JsonFileStore
from .store import StoreRegistry
from .store import default_registry

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "::"

# Flags a scope refuses outright
DISALLOWED_FLAGS: dict[Scope, frozenset[Flag]] = {
    Scope.PLUGIN: frozenset({Flag.PLUGIN_ONLY}),
}


def resolve_store_path(scope: Scope, context: HostContext, item: Item | None = None) -> Path:
    """Map a scope to the JSON file that backs it.

    Args:
        scope: Target scope
        context: Host facts (roaming root, active library)
        item: Item whose directory holds the store (item scope only)

    Returns:
        Absolute path of the backing JSON file

    Raises:
        MissingItemContextError: Item scope without an item file path
        MissingLibraryContextError: Library scope with no active library
    """
    if scope is Scope.APP:
        path = context.configurations_dir / APP_CONFIG_FILE
    elif scope is Scope.PLUGIN:
        path = context.configurations_dir / PLUGIN_CONFIG_FILE
    elif scope is Scope.GLOBAL:
        path = context.configurations_dir / GLOBAL_CONFIG_FILE
    elif scope is Scope.ITEM:
        file_path = getattr(item, "file_path", None)
        if not file_path:
            raise MissingItemContextError("Item scope requires an item with a file path")
        path = Path(file_path).parent / ITEM_CONFIG_FILE
    elif scope is Scope.LIBRARY:
        if not context.library_path:
            raise MissingLibraryContextError("Library scope requires an active library path")
        path = Path(context.library_path) / LIBRARY_CONFIG_FILE
    else:
        raise ValueError(f"Unknown scope: {scope!r}")
    return path.resolve()


class ScopedConfig:
    """Key/value view of one scope's configuration file.

    Handles for the same file share one JsonFileStore through the registry,
    so a write through one handle is seen by every other.

    Args:
        scope: Target scope (Scope or its string value)
        flags: Flags to apply (Flag or string values)
        item: Item reference, required for item scope
        context: Host facts used for path resolution and key namespacing
        registry: Cache of stores by path

    Raises:
        InvalidFlagCombinationError: A flag is disallowed for the scope
        MissingPluginContextError: PLUGIN_ONLY without an active plugin
        MissingItemContextError: Item scope without an item file path
        MissingLibraryContextError: Library scope with no active library
    """

    def __init__(
        self,
        scope: Scope | str,
        flags: Iterable[Flag | str] = (),
        item: Item | None = None,
        *,
        context: HostContext,
        registry: StoreRegistry,
    ):
        scope = Scope(scope)
        requested = [Flag(flag) for flag in flags]
        self._validate(scope, requested, context)

        self._scope = scope
        self._flags = frozenset(requested)
        self._item = item
        self._context = context
        self._path = resolve_store_path(scope, context, item)
        self._store = registry.get_instance(self._path)
        logger.debug(f"Created {scope.value} config handle on {self._path}")

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def flags(self) -> frozenset[Flag]:
        return self._flags

    @property
    def item(self) -> Item | None:
        return self._item

    @property
    def context(self) -> HostContext:
        return self._context

    @property
    def path(self) -> Path:
        return self._path

    @property
    def store(self) -> JsonFileStore:
        return self._store

    def key_for(self, key: str) -> str:
        """Return the key actually used against the store."""
        if Flag.PLUGIN_ONLY in self._flags:
            return KEY_SEPARATOR.join([self._context.plugin_id, key])
        return key

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(self.key_for(key), default)

    def set(self, key: str, value: Any) -> None:
        self._store.set(self.key_for(key), value)
        logger.info(f"Set '{key}' in {self._scope.value} scope")

    def delete(self, key: str) -> None:
        self._store.delete(self.key_for(key))

    def __repr__(self) -> str:
        flags = ", ".join(sorted(flag.value for flag in self._flags))
        return f"ScopedConfig(scope={self._scope.value!r}, flags=[{flags}], path={str(self._path)!r})"

    # ===== Private Helpers =====

    @staticmethod
    def _validate(scope: Scope, flags: list[Flag], context: HostContext) -> None:
        disallowed = DISALLOWED_FLAGS.get(scope, frozenset())
        if any(flag in disallowed for flag in flags):
            names = ", ".join(flag.value for flag in flags)
            raise InvalidFlagCombinationError(f"Invalid flag combination for {scope.value} scope: [{names}]")

        if Flag.PLUGIN_ONLY in flags and not context.plugin_id:
            raise MissingPluginContextError(f"{Flag.PLUGIN_ONLY.value} flag requires an active plugin context")


def config(
    scope: Scope | str,
    flags: Iterable[Flag | str] | None = None,
    item: Item | None = None,
    *,
    context: HostContext | None = None,
    registry: StoreRegistry | None = None,
) -> ScopedConfig:
    """Create a configuration handle for ``scope``.

    Args:
        scope: Target scope
        flags: Optional flags, e.g. ``[Flag.PLUGIN_ONLY]``
        item: Item reference for item scope
        context: Host facts (default: read from environment)
        registry: Store cache (default: the process-wide registry)

    Returns:
        A ScopedConfig handle

    Example:
        ```python
        config("global").set("theme", "dark")
        config("global").get("theme")  # "dark"
        ```
    """
    return ScopedConfig(
        scope,
        flags or (),
        item,
        context=context if context is not None else HostContext.from_env(),
        registry=registry if registry is not None else default_registry,
    )
