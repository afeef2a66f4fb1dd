"""Resource site client tests — httpx MockTransport stands in for the site.

Tests cover:
    - item mapping (title cleanup, m3u8 episode selection, year, html desc, douban id)
    - m3u8 links recovered from the description when play url has none
    - body without a list yields no results
    - extra pages fetched up to search_max_pages
    - a failing extra page is dropped
    - non-string vod_class mapped to text; an item that fails to map is skipped alone
    - first-page HTTP error / invalid JSON raise DownstreamError
"""

import httpx
import pytest

from app.core.errors import DownstreamError
from app.core.settings import settings
from app.search import downstream
from app.search.downstream import search_from_api
from app.search.schema import ApiSite, SearchResult

SITE = ApiSite(key="alpha", api="https://alpha.example/api.php/provide/vod", name="Alpha")


def _item(vod_id=101, name="  Test   Show ", **overrides):
    item = {
        "vod_id": vod_id,
        "vod_name": name,
        "vod_pic": "https://img.example/1.jpg",
        "vod_play_url": "HD$https://a.example/1.m3u8#$https://a.example/2.m3u8"
                        "$$$mp4$https://b.example/1.mp4",
        "vod_class": "Drama",
        "vod_year": "2021年",
        "vod_content": "<p>Great &amp; fun</p><p>Second line</p>",
        "type_name": "TV",
        "vod_douban_id": "12345",
    }
    item.update(overrides)
    return item


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_maps_item_fields():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"pagecount": 1, "list": [_item()]})

    async with _client(handler) as client:
        results = await search_from_api(SITE, "test show", client)

    assert seen["params"] == {"ac": "videolist", "wd": "test show"}
    assert len(results) == 1
    r = results[0]
    assert r.id == "101"
    assert r.title == "Test Show"
    assert r.episodes == ["https://a.example/1.m3u8", "https://a.example/2.m3u8"]
    assert r.episodes_titles == ["HD", "2"]
    assert r.year == "2021"
    assert r.desc == "Great & fun\nSecond line"
    assert r.douban_id == 12345
    assert r.source == "alpha" and r.source_name == "Alpha"
    assert r.model_dump(by_alias=True)["class"] == "Drama"


@pytest.mark.asyncio
async def test_m3u8_recovered_from_description():
    item = _item(vod_play_url="", vod_year="", vod_douban_id=None,
                 vod_content="watch $https://c.example/ep1.m3u8 now")

    def handler(request):
        return httpx.Response(200, json={"list": [item]})

    async with _client(handler) as client:
        (r,) = await search_from_api(SITE, "q", client)

    assert r.episodes == ["https://c.example/ep1.m3u8"]
    assert r.episodes_titles == ["1"]
    assert r.year == "unknown"
    assert r.douban_id is None


@pytest.mark.asyncio
async def test_body_without_list_is_empty():
    async with _client(lambda request: httpx.Response(200, json={"code": 0})) as client:
        assert await search_from_api(SITE, "q", client) == []


@pytest.mark.asyncio
async def test_extra_pages_capped(monkeypatch):
    monkeypatch.setattr(settings, "search_max_pages", 2)
    pages = []

    def handler(request):
        pg = int(request.url.params.get("pg", "1"))
        pages.append(pg)
        return httpx.Response(200, json={"pagecount": 4, "list": [_item(vod_id=pg)]})

    async with _client(handler) as client:
        results = await search_from_api(SITE, "q", client)

    assert sorted(pages) == [1, 2]
    assert [r.id for r in results] == ["1", "2"]


@pytest.mark.asyncio
async def test_failing_extra_page_dropped():
    def handler(request):
        pg = int(request.url.params.get("pg", "1"))
        if pg == 2:
            return httpx.Response(502)
        return httpx.Response(200, json={"pagecount": 3, "list": [_item(vod_id=pg)]})

    async with _client(handler) as client:
        results = await search_from_api(SITE, "q", client)

    assert [r.id for r in results] == ["1", "3"]


@pytest.mark.asyncio
async def test_http_error_raises():
    async with _client(lambda request: httpx.Response(503)) as client:
        with pytest.raises(DownstreamError) as exc:
            await search_from_api(SITE, "q", client)
    assert exc.value.source == "alpha"


@pytest.mark.asyncio
async def test_invalid_json_raises():
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(DownstreamError):
            await search_from_api(SITE, "q", client)


@pytest.mark.asyncio
async def test_non_string_class_is_stringified():
    def handler(request):
        return httpx.Response(200, json={"list": [_item(vod_class=5)]})

    async with _client(handler) as client:
        (r,) = await search_from_api(SITE, "q", client)

    assert r.class_ == "5"


@pytest.mark.asyncio
async def test_unmappable_item_skipped(monkeypatch):
    real_map = downstream._map_item

    def map_item(item, site):
        if item["vod_id"] == 2:
            return SearchResult.model_validate({"id": None})
        return real_map(item, site)
    monkeypatch.setattr(downstream, "_map_item", map_item)

    def handler(request):
        return httpx.Response(200, json={"list": [_item(vod_id=1), _item(vod_id=2), _item(vod_id=3)]})

    async with _client(handler) as client:
        results = await search_from_api(SITE, "q", client)

    assert [r.id for r in results] == ["1", "3"]
