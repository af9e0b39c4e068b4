"""Proxy for markdown files linked from content items."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from content_vault.api.deps import get_markdown_fetcher
from content_vault.markdown.fetcher import MarkdownFetcher, MarkdownFetchError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/markdown")
async def get_markdown(
    url: str | None = None,
    fetcher: MarkdownFetcher = Depends(get_markdown_fetcher),
):
    if not url:
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        content = await fetcher.fetch(url)
    except MarkdownFetchError as exc:
        logger.warning("Error fetching markdown: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to fetch markdown content") from exc

    return {"content": content}
