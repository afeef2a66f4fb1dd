"""Root conftest — every test gets its own config file path and a fresh memory store."""

import json

import pytest

from app.core.settings import settings
from app.storage.factory import get_storage


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "config_file", tmp_path / "config.json")
    monkeypatch.setattr(settings, "storage_type", "memory")
    monkeypatch.setattr(settings, "storage_file", tmp_path / "user_settings.json")
    monkeypatch.setattr(settings, "cache_time", 600)
    monkeypatch.setattr(settings, "search_max_pages", 5)
    get_storage.cache_clear()
    yield
    get_storage.cache_clear()


@pytest.fixture
def write_config(tmp_path):
    """Write config.json with the given api_site mapping (plus any top-level keys)."""
    def _write(api_site: dict, **extra):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"api_site": api_site, **extra}), encoding="utf-8")
        return path
    return _write
