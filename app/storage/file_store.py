"""
Purpose:
- JSON-file backed user settings: {"<user>": {"filter_adult_content": false}, ...}
- Reads the file on every lookup so hand edits apply without a restart.
"""

from __future__ import annotations
import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import ValidationError
from ..core.errors import StorageError
from ..search.schema import UserSettings


class FileStorage:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = asyncio.Lock()

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} must contain a JSON object")
        return data

    async def get_user_settings(self, user: str) -> Optional[UserSettings]:
        raw = (await asyncio.to_thread(self._read_all)).get(user)
        if raw is None:
            return None
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as e:
            raise StorageError(f"bad settings for user {user!r}") from e

    async def set_user_settings(self, user: str, prefs: UserSettings) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write_user, user, prefs.model_dump())

    def _write_user(self, user: str, raw: Dict[str, Any]) -> None:
        data = self._read_all()
        data[user] = raw
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)
