"""JSON-file-backed key/value store and its process-wide registry."""

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import ConfigFileError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Key/value store persisted as a single JSON object.

    The file is read on first access and kept in memory afterwards. Every
    mutation rewrites the whole file.

    Args:
        path: Location of the JSON file (need not exist yet)
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._data: dict[str, Any] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = dict(self._load())
        data[key] = value
        self._commit(data)

    def delete(self, key: str) -> None:
        current = self._load()
        if key not in current:
            return
        data = dict(current)
        del data[key]
        self._commit(data)

    def keys(self) -> list[str]:
        return list(self._load())

    def __contains__(self, key: object) -> bool:
        return key in self._load()

    def reload(self) -> None:
        """Drop the in-memory copy so the next access re-reads the file."""
        self._data = None

    # ===== Private Helpers =====

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            self._data = self._read_json()
        return self._data

    def _commit(self, data: dict[str, Any]) -> None:
        # Memory only changes once the file write succeeded.
        self._write_json(data)
        self._data = data

    def _read_json(self) -> dict[str, Any]:
        """Read the backing file.

        Returns:
            Mapping from the file, or an empty dict if the file doesn't exist

        Raises:
            ConfigFileError: If the file can't be read or isn't a JSON object
        """
        if not self._path.exists():
            logger.debug(f"No configuration file at {self._path}, starting empty")
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigFileError(f"Failed to read configuration from {self._path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigFileError(f"Configuration in {self._path} is not a JSON object")

        logger.debug(f"Loaded {len(data)} keys from {self._path}")
        return data

    def _write_json(self, data: dict[str, Any]) -> None:
        """Write the backing file.

        Raises:
            ConfigFileError: If serialisation or the write fails
        """
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ConfigFileError(f"Configuration for {self._path} is not JSON serialisable: {e}") from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ConfigFileError(f"Failed to write configuration to {self._path}: {e}") from e

        logger.debug(f"Wrote {len(data)} keys to {self._path}")


class StoreRegistry:
    """Caches one JsonFileStore per absolute file path."""

    def __init__(self):
        self._stores: dict[Path, JsonFileStore] = {}

    def get_instance(self, path: Path | str) -> JsonFileStore:
        """Return the shared store for ``path``, creating it on first use.

        Args:
            path: Path to the JSON file

        Returns:
            The same JsonFileStore for every request with an equivalent path
        """
        key = Path(path).resolve()
        store = self._stores.get(key)
        if store is None:
            store = JsonFileStore(key)
            self._stores[key] = store
            logger.info(f"Opened configuration store {key}")
        return store

    def clear(self) -> None:
        self._stores.clear()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return Path(path).resolve() in self._stores

    def __len__(self) -> int:
        return len(self._stores)


default_registry = StoreRegistry()
