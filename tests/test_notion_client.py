"""Tests for the Notion HTTP client against a mocked transport."""

import asyncio
import json

import httpx
import pytest

from content_vault.notion.client import NotionAPIError, NotionClient


def _client(handler) -> NotionClient:
    return NotionClient("secret", transport=httpx.MockTransport(handler))


def _run(coro):
    return asyncio.run(coro)


def test_headers_and_get_page():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["version"] = request.headers["Notion-Version"]
        seen["path"] = request.url.path
        return httpx.Response(200, json={"id": "p1"})

    async def go():
        client = _client(handler)
        try:
            return await client.get_page("p1")
        finally:
            await client.close()

    assert _run(go()) == {"id": "p1"}
    assert seen == {"auth": "Bearer secret", "version": "2022-06-28", "path": "/v1/pages/p1"}


def test_upstream_message_is_propagated():
    def handler(request):
        return httpx.Response(404, json={"object": "error", "message": "Could not find page"})

    with pytest.raises(NotionAPIError) as excinfo:
        _run(_client(handler).get_page("missing"))
    assert excinfo.value.message == "Could not find page"
    assert excinfo.value.status_code == 404


def test_fallback_message_without_body():
    def handler(request):
        return httpx.Response(502, content=b"bad gateway")

    with pytest.raises(NotionAPIError) as excinfo:
        _run(_client(handler).get_block_children("p1"))
    assert excinfo.value.message == "Failed to fetch blocks"


def test_transport_error_uses_fallback():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(NotionAPIError) as excinfo:
        _run(_client(handler).get_page("p1"))
    assert excinfo.value.message == "Failed to fetch page"
    assert excinfo.value.status_code is None


def test_block_children_pagination():
    calls = []

    def handler(request):
        cursor = request.url.params.get("start_cursor")
        calls.append(cursor)
        if cursor is None:
            return httpx.Response(
                200, json={"results": [{"id": "b1"}], "has_more": True, "next_cursor": "c2"}
            )
        return httpx.Response(200, json={"results": [{"id": "b2"}], "has_more": False})

    blocks = _run(_client(handler).get_block_children("p1"))
    assert [b["id"] for b in blocks] == ["b1", "b2"]
    assert calls == [None, "c2"]


def test_query_all_pages_sends_filter_and_sorts():
    bodies = []

    def handler(request):
        body = json.loads(request.content)
        bodies.append(body)
        if "start_cursor" not in body:
            return httpx.Response(
                200, json={"results": [{"id": "a"}], "has_more": True, "next_cursor": "n"}
            )
        return httpx.Response(200, json={"results": [{"id": "b"}], "has_more": False})

    query_filter = {"and": [{"property": "Type", "select": {"equals": "Video"}}]}
    sorts = [{"property": "Date Added", "direction": "descending"}]
    pages = _run(_client(handler).query_all_pages("db", filter=query_filter, sorts=sorts))

    assert [p["id"] for p in pages] == ["a", "b"]
    assert bodies[0] == {"page_size": 100, "filter": query_filter, "sorts": sorts}
    assert bodies[1]["start_cursor"] == "n"


def test_create_update_archive_payloads():
    requests = []

    def handler(request):
        requests.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"id": "p1"})

    async def go():
        client = _client(handler)
        await client.create_page("db", {"Title": {}})
        await client.update_page("p1", {"Status": {"select": {"name": "Done"}}})
        await client.archive_page("p1")

    _run(go())
    assert requests == [
        ("POST", "/v1/pages", {"parent": {"database_id": "db"}, "properties": {"Title": {}}}),
        ("PATCH", "/v1/pages/p1", {"properties": {"Status": {"select": {"name": "Done"}}}}),
        ("PATCH", "/v1/pages/p1", {"archived": True}),
    ]


def test_non_json_success_body():
    def handler(request):
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(NotionAPIError) as excinfo:
        _run(_client(handler).get_page("p1"))
    assert excinfo.value.message == "Failed to fetch page"
    assert excinfo.value.status_code == 200


def test_non_object_success_body():
    def handler(request):
        return httpx.Response(200, json=["a", "b"])

    with pytest.raises(NotionAPIError) as excinfo:
        _run(_client(handler).get_block_children("p1"))
    assert excinfo.value.message == "Failed to fetch blocks"


def test_pagination_stops_without_cursor():
    calls = []

    def handler(request):
        calls.append(request.url.params.get("start_cursor"))
        return httpx.Response(200, json={"results": [{"id": "b1"}], "has_more": True})

    blocks = _run(_client(handler).get_block_children("p1"))
    assert [b["id"] for b in blocks] == ["b1"]
    assert calls == [None]
