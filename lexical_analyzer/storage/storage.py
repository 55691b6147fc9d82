"""Key-value stores for automaton snapshots.

A snapshot is a flat mapping of a few fixed keys to JSON-compatible scalars
and lists, written by ``Analyzer.save_state``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

from lexical_analyzer.utils.atomic import atomic_write_json
from lexical_analyzer.utils.logging import get_logger

logger = get_logger("storage")


@runtime_checkable
class Storage(Protocol):
    """Anything with session-style ``get``/``set`` of named values."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class MemoryStorage:
    """Dict-backed storage living as long as the object does."""

    def __init__(self, data: Optional[dict[str, Any]] = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[str]:
        return list(self._data)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


class JsonFileStorage:
    """
    Storage persisted as one JSON object in a file.

    The file is read on first access and rewritten atomically on every
    change, so a crash never leaves a half-written snapshot.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the storage.

        Args:
            path: JSON file holding the values (created on first write)
        """
        self.path = Path(path)
        self._data: Optional[dict[str, Any]] = None

    def _load(self) -> dict[str, Any]:
        """Load values from the file once."""
        if self._data is not None:
            return self._data

        self._data = {}
        if not self.path.exists():
            logger.debug("no_existing_storage", path=str(self.path))
            return self._data

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("storage_load_failed", path=str(self.path), error=str(e))
            return self._data

        if not isinstance(data, dict):
            logger.warning(
                "storage_load_failed",
                path=str(self.path),
                error=f"expected a JSON object, got {type(data).__name__}",
            )
            return self._data

        self._data = data
        logger.debug("storage_loaded", path=str(self.path), keys=len(data))
        return self._data

    def _save(self) -> None:
        atomic_write_json(self.path, self._load())

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._load()[key] = value
        self._save()

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if it existed."""
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save()
        return True

    def clear(self) -> None:
        """Remove every value and the backing file."""
        self._data = {}
        if self.path.exists():
            self.path.unlink()

    def keys(self) -> list[str]:
        return list(self._load())

    def to_dict(self) -> dict[str, Any]:
        return dict(self._load())
