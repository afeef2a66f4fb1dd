"""
Purpose:
- FastAPI application factory and router mounts.
- CORS headers are stamped per response by core.cors (clients call cross-origin, incl. preflight).
- Uvicorn will serve this on 0.0.0.0:8000 by default.
"""

import logging
from fastapi import FastAPI
from .core.settings import settings
from .core.logging_setup import setup_logging
from .api.health import router as health_router
from .api.search import router as search_router

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_format)
    app = FastAPI(title="Aggregated Search API", version="0.1.0")
    app.include_router(health_router)
    app.include_router(search_router)
    logger.info("Search API ready (config=%s, storage=%s)", settings.config_file, settings.storage_type)
    return app


app = create_app()
