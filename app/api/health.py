# Common language: Environment/ops probe that surfaces version pins, config presence, and storage backend.
# Use this before/after upgrades or config edits to confirm no silent drift.

from fastapi import APIRouter
from ..core.settings import settings
from ..search.sites import get_available_api_sites, get_cache_time
from pathlib import Path
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

def _file_info(p: Path):
    try:
        exists = p.exists()
        size = p.stat().st_size if exists else 0
        return {"path": str(p), "exists": exists, "size": size}
    except OSError:
        return {"path": str(p), "exists": False, "size": 0}

@router.get("/healthz")
def healthz():
    all_sites = get_available_api_sites(filter_adult=False)
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "httpx": _ver("httpx"),
        },
        "search_config": {
            "config_file": _file_info(Path(settings.config_file)),
            "cache_time": get_cache_time(),
            "sites": len(all_sites),
            "adult_sites": sum(1 for s in all_sites if s.is_adult),
        },
        "storage": {
            "type": settings.storage_type,
            "file": _file_info(Path(settings.storage_file)) if settings.storage_type == "file" else None,
        },
    }
