"""
Purpose:
- Sanity-check critical library versions after upgrades.
- Import the exact modules we use and print versions so we can spot drift immediately.
"""

import sys
import fastapi
import httpx
import pydantic
import uvicorn
from pydantic_settings import BaseSettings

print("python", sys.version)
print("fastapi", fastapi.__version__)
print("uvicorn", uvicorn.__version__)
print("httpx", httpx.__version__)
print("pydantic", pydantic.VERSION)
print("pydantic-settings", BaseSettings.__module__.split(".")[0])  # presence check
# config + site list load without touching the network
from app.search.sites import get_available_api_sites, get_cache_time
print("sites", len(get_available_api_sites(filter_adult=False)), "cache_time", get_cache_time())
print("OK")
