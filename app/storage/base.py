from __future__ import annotations
from typing import Optional, Protocol
from ..search.schema import UserSettings


class UserSettingsStore(Protocol):
    async def get_user_settings(self, user: str) -> Optional[UserSettings]: ...

    async def set_user_settings(self, user: str, prefs: UserSettings) -> None: ...
