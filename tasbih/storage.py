"""
Design (storage.py)
- Purpose: Host key-value storage for the persisted record (a local-storage-like slot).
- Inputs: Path (from get_data_path()), string keys and string values.
- Outputs: str | None on get_item; None on set_item.
- Side effects: JsonFileStorage reads/writes one JSON file. Failures are raised as
               LoadFailure / PersistFailure; the CounterStore decides to swallow them.
- Thread-safety: Call from main thread only (Tk event handlers).
"""

import json
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Protocol

from .config import APP_DIR_NAME, STORAGE_FILENAME


class TasbihStorageError(Exception):
    """Base class for storage problems. Never fatal for the counter."""


class LoadFailure(TasbihStorageError):
    """Persisted record is missing its container, unreadable or malformed."""


class PersistFailure(TasbihStorageError):
    """Storage rejected a write (disabled, quota exceeded, read-only disk...)."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


def get_data_path() -> Path:
    """
    Resolve path for the storage file. TASBIH_DATA_DIR wins; then the per-user app data
    dir (APPDATA on Windows, XDG data dir elsewhere). Fallback to dir next to executable.
    """
    override = os.environ.get("TASBIH_DATA_DIR")
    if override:
        return Path(override) / STORAGE_FILENAME

    if sys.platform == "win32":
        base_dir = os.environ.get("APPDATA")
        base = Path(base_dir) / APP_DIR_NAME if base_dir else None
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        root = Path(xdg) if xdg else Path.home() / ".local" / "share"
        base = root / "tasbih-counter"
    if base is not None:
        try:
            base.mkdir(parents=True, exist_ok=True)
            return base / STORAGE_FILENAME
        except OSError:
            pass

    # Fallback: next to executable (or project root when running as script)
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        base = Path(sys.executable).parent
    else:
        base = Path(__file__).resolve().parent.parent
    return base / STORAGE_FILENAME


class JsonFileStorage:
    """
    Design (JsonFileStorage)
    - State:
        path: JSON file holding {key -> string value}
    - Writes go through a temp file + os.replace so a crash mid-write leaves the old file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise LoadFailure(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise LoadFailure(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise LoadFailure(f"value for {key!r} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except LoadFailure:
            # Corrupt file: nothing in it can be read back anyway
            data = {}
        data[key] = value
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistFailure(f"cannot write {self.path}: {e}") from e


class MemoryStorage:
    """In-process storage. quota (characters) and disabled mimic browser storage limits."""

    def __init__(self, quota: Optional[int] = None, disabled: bool = False) -> None:
        self.quota = quota
        self.disabled = disabled
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        if self.disabled:
            raise LoadFailure("storage is disabled")
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.disabled:
            raise PersistFailure("storage is disabled")
        if self.quota is not None:
            used = sum(len(k) + len(v) for k, v in self._items.items() if k != key)
            if used + len(key) + len(value) > self.quota:
                raise PersistFailure("quota exceeded")
        self._items[key] = value
