"""
Purpose:
- Decide whether adult resource sites are searched for a request.
- Inputs: `user` query param or `Authorization: Bearer <user>`, the `include_adult` flag,
  and the user's stored filter_adult_content preference.

Rule:
- Filtering is relaxed only when the stored preference is exactly False AND include_adult=true.
- Unknown user, missing settings, or a storage error all keep filtering on.
"""

from __future__ import annotations
import logging
from typing import Optional
from ..storage.factory import get_storage

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

def resolve_user_name(user_param: Optional[str], authorization: Optional[str]) -> Optional[str]:
    if user_param:
        return user_param
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):] or None
    return None

def parse_include_adult(raw: Optional[str]) -> bool:
    return raw == "true"

async def resolve_user_filter(user_name: Optional[str]) -> bool:
    """True when this user's results should have adult sites filtered out."""
    if not user_name:
        return True
    try:
        prefs = await get_storage().get_user_settings(user_name)
    except Exception:
        logger.warning("User settings lookup failed; filtering adult content",
                       exc_info=True, extra={"user": user_name})
        return True
    return getattr(prefs, "filter_adult_content", None) is not False

def should_filter_adult(user_filter: bool, include_adult: bool) -> bool:
    return user_filter or not include_adult
