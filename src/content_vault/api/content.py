"""CRUD endpoints for the content database."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from content_vault.api.deps import get_notion_client, get_settings
from content_vault.config import Settings
from content_vault.content.filters import DEFAULT_SORTS, ReadMode, build_query_filter
from content_vault.content.items import (
    build_create_properties,
    build_update_properties,
    collect_filter_options,
    page_to_item,
)
from content_vault.content.models import (
    ContentItemResponse,
    ContentListResponse,
    CreateContentRequest,
    UpdateContentRequest,
)
from content_vault.notion.client import NotionAPIError, NotionClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content")


def _database_id(settings: Settings) -> str:
    if not settings.notion_database_id:
        raise HTTPException(status_code=500, detail="Database ID not configured")
    return settings.notion_database_id


@router.get("", response_model=ContentListResponse)
async def list_content(
    content_type: str | None = Query(None, alias="type"),
    status: str | None = None,
    source: str | None = None,
    search: str | None = None,
    favorite: bool = False,
    mode: ReadMode = ReadMode.ALL,
    settings: Settings = Depends(get_settings),
    client: NotionClient = Depends(get_notion_client),
):
    """List content items, newest first, with optional filters."""
    database_id = _database_id(settings)
    query_filter = build_query_filter(
        type=content_type,
        status=status,
        source=source,
        search=search,
        favorite=favorite,
        mode=mode,
    )

    try:
        pages = await client.query_all_pages(
            database_id, filter=query_filter, sorts=DEFAULT_SORTS
        )
    except NotionAPIError as exc:
        logger.exception("Error fetching content")
        raise HTTPException(status_code=500, detail="Failed to fetch content") from exc

    items = [page_to_item(page) for page in pages]
    return ContentListResponse(items=items, filters=collect_filter_options(items))


@router.post("", response_model=ContentItemResponse, status_code=201)
async def create_content(
    body: CreateContentRequest,
    settings: Settings = Depends(get_settings),
    client: NotionClient = Depends(get_notion_client),
):
    if not body.title or not body.title.strip():
        raise HTTPException(status_code=400, detail="Title is required")
    database_id = _database_id(settings)

    try:
        page = await client.create_page(database_id, build_create_properties(body))
    except NotionAPIError as exc:
        logger.exception("Error creating content %r", body.title)
        raise HTTPException(status_code=500, detail="Failed to add content") from exc

    logger.info("Created content item %s", page.get("id"))
    return ContentItemResponse(item=page_to_item(page))


@router.patch("", response_model=ContentItemResponse)
async def update_content(
    body: UpdateContentRequest,
    client: NotionClient = Depends(get_notion_client),
):
    """Change an item's status and/or favorite flag."""
    if not body.id:
        raise HTTPException(status_code=400, detail="ID required")

    properties = build_update_properties(status=body.status, favorite=body.favorite)
    if not properties:
        raise HTTPException(status_code=400, detail="Nothing to update")

    try:
        page = await client.update_page(body.id, properties)
    except NotionAPIError as exc:
        logger.exception("Error updating content %s", body.id)
        raise HTTPException(status_code=500, detail="Failed to update content") from exc

    return ContentItemResponse(item=page_to_item(page))


@router.delete("")
async def delete_content(
    id: str | None = None,
    client: NotionClient = Depends(get_notion_client),
):
    """Archive an item. Notion keeps it in the trash."""
    if not id:
        raise HTTPException(status_code=400, detail="ID required")

    try:
        await client.archive_page(id)
    except NotionAPIError as exc:
        logger.exception("Error archiving content %s", id)
        raise HTTPException(status_code=500, detail="Failed to delete content") from exc

    logger.info("Archived content item %s", id)
    return {"success": True}
