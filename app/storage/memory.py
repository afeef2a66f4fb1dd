from __future__ import annotations
from typing import Dict, Optional
from ..search.schema import UserSettings


class MemoryStorage:
    """Process-local store; contents vanish on restart."""

    def __init__(self) -> None:
        self._data: Dict[str, UserSettings] = {}

    async def get_user_settings(self, user: str) -> Optional[UserSettings]:
        return self._data.get(user)

    async def set_user_settings(self, user: str, prefs: UserSettings) -> None:
        self._data[user] = prefs
