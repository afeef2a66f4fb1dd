"""
Purpose:
- Load the resource site list (and optional cache_time override) from the config file.
- Provide the adult-aware site list used by the search fan-out.

File shape:
    {"cache_time": 7200,
     "api_site": {"<key>": {"api": "...", "name": "...", "detail": "...", "is_adult": false}}}
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List
from pydantic import ValidationError
from ..core.errors import ConfigError
from ..core.settings import settings
from .schema import ApiSite

logger = logging.getLogger(__name__)

def load_config(path: Path) -> Dict[str, Any]:
    """
    Read the config file. A missing file is an empty config;
    unreadable or non-object JSON raises ConfigError.
    """
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data

def _load_or_empty() -> Dict[str, Any]:
    try:
        return load_config(Path(settings.config_file))
    except ConfigError as e:
        logger.warning("Ignoring site config: %s", e.message)
        return {}

def _parse_sites(raw: Any) -> List[ApiSite]:
    if not isinstance(raw, dict):
        return []
    sites: List[ApiSite] = []
    for key, entry in raw.items():
        if not isinstance(entry, dict) or entry.get("disabled"):
            continue
        try:
            sites.append(ApiSite(key=key, **{k: v for k, v in entry.items() if k != "key"}))
        except (TypeError, ValidationError):
            logger.warning("Skipping malformed site entry", extra={"site": key})
    return sites

def get_available_api_sites(filter_adult: bool) -> List[ApiSite]:
    """Enabled sites in file order; adult sites dropped when filter_adult is set."""
    sites = _parse_sites(_load_or_empty().get("api_site"))
    if filter_adult:
        sites = [s for s in sites if not s.is_adult]
    return sites

def get_cache_time() -> int:
    raw = _load_or_empty().get("cache_time")
    if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
        return raw
    return settings.cache_time
