"""Fetch markdown files referenced by content items."""

import logging
import re

import httpx

logger = logging.getLogger(__name__)

_DRIVE_FILE_RE = re.compile(r"drive\.google\.com/file/d/([^/]+)")


class MarkdownFetchError(Exception):
    """Raised when a markdown file cannot be downloaded."""


def to_direct_download_url(url: str) -> str:
    """Turn a Google Drive file view link into a direct download link.

    Any other URL is returned unchanged.
    """
    m = _DRIVE_FILE_RE.search(url)
    if m:
        return f"https://drive.google.com/uc?export=download&id={m.group(1)}"
    return url


class MarkdownFetcher:
    def __init__(
        self, *, timeout: float = 30.0, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch(self, url: str) -> str:
        target = to_direct_download_url(url)
        try:
            resp = await self._client.get(target)
        except httpx.RequestError as exc:
            raise MarkdownFetchError(f"Request to {target} failed: {exc}") from exc

        if resp.is_error:
            raise MarkdownFetchError(f"{target} returned {resp.status_code}")
        return resp.text
