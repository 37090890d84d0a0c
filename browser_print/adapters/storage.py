"""Persistence backends for the printer selection."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)


class MemoryStorage:
    """Dictionary-backed storage; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def save(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStorage:
    """Stores string values under keys in a single JSON object file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def load(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def save(self, key: str, value: str) -> None:
        payload = self._read()
        payload[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as stream:
            json.dump(payload, stream, indent=2)

        if hasattr(os, "chmod"):
            os.chmod(self.path, 0o600)

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as stream:
                payload = json.load(stream)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}

        if not isinstance(payload, dict):
            LOGGER.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}

        return payload
