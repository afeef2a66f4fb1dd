"""
Purpose:
- The "service" orchestrates filter policy -> site list -> concurrent fetch -> merge -> response.
- Best effort: a failing site contributes no results and never fails the request.
"""

from __future__ import annotations
import asyncio
import logging
from typing import List, Optional
import httpx
from ..core.settings import settings
from .downstream import search_from_api
from .policy import resolve_user_filter, should_filter_adult
from .schema import SearchResponse, SearchResult
from .sites import get_available_api_sites

logger = logging.getLogger(__name__)

async def search_service(query: str, user_name: Optional[str], include_adult: bool) -> SearchResponse:
    user_filter = await resolve_user_filter(user_name)
    filter_adult = should_filter_adult(user_filter, include_adult)

    # config file read stays off the event loop
    sites = await asyncio.to_thread(get_available_api_sites, filter_adult)
    if not sites:
        logger.info("No resource sites available", extra={"query": query})
        return SearchResponse()

    async with httpx.AsyncClient(
        timeout=settings.search_timeout_seconds, follow_redirects=True
    ) as client:
        outcomes = await asyncio.gather(
            *(search_from_api(site, query, client) for site in sites),
            return_exceptions=True,
        )

    results: List[SearchResult] = []
    for site, outcome in zip(sites, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning("Site search failed: %r", outcome, extra={"site": site.key, "query": query})
            continue
        results.extend(outcome)

    # all results are returned as regular results; adult sites were already excluded upstream
    return SearchResponse(regular_results=results, adult_results=[])
