"""
Purpose:
- Per-user settings store (adult-content preference) behind one small interface.
- get_storage() picks the backend from settings.storage_type once per process.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from ..core.errors import StorageError
from ..core.settings import settings
from .base import UserSettingsStore
from .file_store import FileStorage
from .memory import MemoryStorage

@lru_cache
def get_storage() -> UserSettingsStore:
    kind = (settings.storage_type or "").strip().lower()
    if kind == "memory":
        return MemoryStorage()
    if kind == "file":
        return FileStorage(Path(settings.storage_file))
    raise StorageError(f"unknown storage_type: {settings.storage_type!r}")
