"""
Purpose:
- Query one resource site (Apple CMS style `?ac=videolist&wd=` API) and map its items to SearchResult.
- Follow pagination up to settings.search_max_pages, fetching extra pages concurrently.

Notes:
- Failures on the first page raise DownstreamError; the caller decides what to drop.
- A failing extra page just contributes nothing.
"""

from __future__ import annotations
import asyncio
import html
import logging
import re
from typing import Any, Dict, List, Optional, Tuple
import httpx
from pydantic import ValidationError
from ..core.errors import DownstreamError
from ..core.settings import settings
from .schema import ApiSite, SearchResult

logger = logging.getLogger(__name__)

API_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json",
}

_TAG_RE = re.compile(r"<[^>]+>")
_YEAR_RE = re.compile(r"\d{4}")
_M3U8_RE = re.compile(r"\$(https?://[^\"'\s]+?\.m3u8)")

def _clean_html(text: str) -> str:
    if not text:
        return ""
    no_tags = _TAG_RE.sub("\n", text)
    lines = [ln.strip() for ln in html.unescape(no_tags).splitlines()]
    return "\n".join(ln for ln in lines if ln)

def _parse_play_url(play_url: str) -> Tuple[List[str], List[str]]:
    """
    vod_play_url holds one or more play sources joined by '$$$';
    each source is 'title$url#title$url...'. Keep the source with the most m3u8 links.
    """
    best_eps: List[str] = []
    best_titles: List[str] = []
    for source in (play_url or "").split("$$$"):
        eps: List[str] = []
        titles: List[str] = []
        for part in source.split("#"):
            pieces = part.split("$")
            if len(pieces) == 2 and pieces[1].endswith(".m3u8"):
                titles.append(pieces[0] or str(len(eps) + 1))
                eps.append(pieces[1])
        if len(eps) > len(best_eps):
            best_eps, best_titles = eps, titles
    return best_eps, best_titles

def _to_int(v: Any) -> Optional[int]:
    try:
        return int(v) if v not in (None, "") else None
    except (TypeError, ValueError):
        return None

def _map_item(item: Dict[str, Any], site: ApiSite) -> SearchResult:
    episodes, titles = _parse_play_url(str(item.get("vod_play_url") or ""))
    content = str(item.get("vod_content") or "")
    if not episodes:
        # some sites only embed play links in the description
        episodes = _M3U8_RE.findall(content)
        titles = [str(i + 1) for i in range(len(episodes))]

    year = _YEAR_RE.search(str(item.get("vod_year") or ""))
    return SearchResult(
        id=str(item.get("vod_id", "")),
        title=" ".join(str(item.get("vod_name") or "").split()),
        poster=str(item.get("vod_pic") or ""),
        episodes=episodes,
        episodes_titles=titles,
        source=site.key,
        source_name=site.name,
        class_=str(item.get("vod_class") or "") or None,
        year=year.group(0) if year else "unknown",
        desc=_clean_html(content),
        type_name=str(item.get("type_name") or ""),
        douban_id=_to_int(item.get("vod_douban_id")),
    )

async def _fetch_page(client: httpx.AsyncClient, site: ApiSite, query: str, page: int) -> Dict[str, Any]:
    params = {"ac": "videolist", "wd": query}
    if page > 1:
        params["pg"] = str(page)
    try:
        r = await client.get(site.api, params=params, headers=API_HEADERS)
        r.raise_for_status()
        data = r.json()
    except (httpx.HTTPError, ValueError) as e:
        raise DownstreamError(f"{site.key} page {page}: {e!r}", source=site.key) from e
    if not isinstance(data, dict):
        raise DownstreamError(f"{site.key} page {page}: unexpected body", source=site.key)
    return data

def _items_of(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    items = data.get("list")
    if not isinstance(items, list):
        return []
    return [it for it in items if isinstance(it, dict)]

async def _search(client: httpx.AsyncClient, site: ApiSite, query: str) -> List[SearchResult]:
    first = await _fetch_page(client, site, query, 1)
    pages = [_items_of(first)]
    if not pages[0]:
        return []

    page_count = min(_to_int(first.get("pagecount")) or 1, settings.search_max_pages)
    if page_count > 1:
        extra = await asyncio.gather(
            *(_fetch_page(client, site, query, p) for p in range(2, page_count + 1)),
            return_exceptions=True,
        )
        for res in extra:
            if isinstance(res, Exception):
                logger.debug("Extra page failed: %s", res, extra={"site": site.key})
                continue
            pages.append(_items_of(res))

    results: List[SearchResult] = []
    for items in pages:
        for it in items:
            try:
                results.append(_map_item(it, site))
            except ValidationError as e:
                logger.warning("Skipping unmappable item %r: %s", it.get("vod_id"), e, extra={"site": site.key})
    return results

async def search_from_api(
    site: ApiSite,
    query: str,
    client: Optional[httpx.AsyncClient] = None,
) -> List[SearchResult]:
    """
    Search one site. Pass a shared client to reuse connections;
    otherwise a short-lived client with the configured timeout is used.
    """
    if client is not None:
        return await _search(client, site, query)
    async with httpx.AsyncClient(
        timeout=settings.search_timeout_seconds, follow_redirects=True
    ) as own:
        return await _search(own, site, query)
