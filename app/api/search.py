"""
Purpose:
- Expose /api/search: aggregated search across configured resource sites.
- OPTIONS preflight is answered by the CORS helper (TV clients need it).
"""

import asyncio
import logging
from typing import Optional
from fastapi import APIRouter, Header, Query
from fastapi.responses import JSONResponse
from ..core.cors import add_cors_headers, handle_options_request
from ..search.cache import cache_headers
from ..search.policy import parse_include_adult, resolve_user_name
from ..search.schema import SearchResponse
from ..search.service import search_service
from ..search.sites import get_cache_time

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])

SEARCH_FAILED = "search failed"

@router.options("")
def search_options(origin: Optional[str] = Header(default=None)):
    return handle_options_request(origin)

@router.get("")
async def search(
    q: Optional[str] = Query(default=None, description="search term"),
    user: Optional[str] = Query(default=None, description="username; falls back to the bearer token"),
    include_adult: Optional[str] = Query(default=None, description="'true' to ask for adult sites"),
    authorization: Optional[str] = Header(default=None),
    origin: Optional[str] = Header(default=None),
):
    try:
        user_name = resolve_user_name(user, authorization)
        # resolve once; used by every cache header below
        cache_time = await asyncio.to_thread(get_cache_time)

        if not q:
            body = SearchResponse()
        else:
            body = await search_service(q, user_name, parse_include_adult(include_adult))

        response = JSONResponse(content=body.to_payload(), headers=cache_headers(cache_time))
    except Exception:
        logger.exception("Search request failed", extra={"query": q})
        response = JSONResponse(
            status_code=500,
            content=SearchResponse(error=SEARCH_FAILED).to_payload(),
        )
    return add_cors_headers(response, origin)
