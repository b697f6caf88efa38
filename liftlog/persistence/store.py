"""Local key/value store.

A single JSON document on disk maps keys to records. The generator never
touches it; the CLI loads the profile, saves programs and appends log
entries through it.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

KEY_BUILDER_CFG = "ATL_BUILDER_CFG_V1"
KEY_PROGRAM = "ATL_PROGRAM_V1"
KEY_LOG = "ATL_LOG_V1"


class JsonStore:
    """Load/save-by-key over one JSON document.

    A missing or unreadable document behaves like an empty store, so a
    corrupt file degrades to defaults instead of blocking the CLI.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable store at {self.path}, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store at {self.path} is not a JSON object, treating as empty")
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)

    def load(self, key: str, fallback: Any = None) -> Any:
        """Load a record by key.

        Args:
            key: Record key
            fallback: Value returned when the key is absent

        Returns:
            Stored value or fallback
        """
        return self._read().get(key, fallback)

    def save(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Saved {key} to {self.path}")

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
            logger.debug(f"Deleted {key} from {self.path}")
