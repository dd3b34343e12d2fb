from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from dinorun.infra.exceptions import PreferencesSaveError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Dict-backed store for tests and headless hosts."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    Flat JSON object of string values on disk.
    Reads are forgiving (anything unreadable is an empty store); writes are atomic.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            data = {k: v for k, v in self._read_all().items() if isinstance(v, str)}
            data[key] = value

            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp, self._path)
        except Exception as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            raise PreferencesSaveError(f"Failed to save preferences to {self._path}: {e}") from e

    def _read_all(self) -> dict:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s, using defaults: %s", self._path, e)
            return {}

        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Malformed preferences in %s, using defaults: %s", self._path, e)
            return {}
        if not isinstance(obj, dict):
            logger.warning("Preferences in %s are not an object, using defaults", self._path)
            return {}
        return obj
