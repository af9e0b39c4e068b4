import asyncio

import httpx
import pytest

from content_vault.markdown.fetcher import MarkdownFetcher, MarkdownFetchError, to_direct_download_url


def test_drive_view_url_converted():
    url = "https://drive.google.com/file/d/abc123XYZ/view?usp=sharing"
    assert to_direct_download_url(url) == "https://drive.google.com/uc?export=download&id=abc123XYZ"


def test_other_urls_unchanged():
    url = "https://raw.githubusercontent.com/u/r/main/notes.md"
    assert to_direct_download_url(url) == url


def test_fetch_returns_text():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, text="# Notes\n")

    fetcher = MarkdownFetcher(transport=httpx.MockTransport(handler))
    content = asyncio.run(fetcher.fetch("https://drive.google.com/file/d/ID1/view"))
    assert content == "# Notes\n"
    assert seen == ["https://drive.google.com/uc?export=download&id=ID1"]


def test_fetch_error_status():
    fetcher = MarkdownFetcher(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
    with pytest.raises(MarkdownFetchError):
        asyncio.run(fetcher.fetch("https://example.com/missing.md"))
