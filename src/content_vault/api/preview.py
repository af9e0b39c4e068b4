"""Notion page preview endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from content_vault.api.deps import get_notion_client
from content_vault.notion.client import NotionAPIError, NotionClient
from content_vault.preview.service import PagePreview, build_preview
from content_vault.utils.page_id import extract_page_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/notion-preview", response_model=PagePreview)
async def notion_preview(
    url: str | None = None,
    client: NotionClient = Depends(get_notion_client),
):
    """Render a read-only HTML preview of the Notion page behind ``url``."""
    if not url:
        raise HTTPException(status_code=400, detail="URL required")

    page_id = extract_page_id(url)
    if not page_id:
        raise HTTPException(status_code=400, detail="Invalid Notion URL")

    try:
        return await build_preview(client, page_id)
    except NotionAPIError as exc:
        logger.exception("Error fetching Notion page %s", page_id)
        raise HTTPException(status_code=500, detail=exc.message or "Failed to fetch page") from exc
    except Exception as exc:
        # Malformed upstream data; still answer with the error envelope.
        logger.exception("Unexpected error previewing Notion page %s", page_id)
        raise HTTPException(status_code=500, detail="Failed to fetch page") from exc
