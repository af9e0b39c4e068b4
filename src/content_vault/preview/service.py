"""Read-only page preview: Notion page + top-level blocks -> HTML."""

import logging

from pydantic import BaseModel

from content_vault.notion.block_renderer import blocks_to_html
from content_vault.notion.client import NotionClient
from content_vault.notion.property_parser import page_cover, page_icon, page_title

logger = logging.getLogger(__name__)


class PagePreview(BaseModel):
    title: str
    html: str
    icon: str | None = None
    cover: str | None = None


async def build_preview(client: NotionClient, page_id: str) -> PagePreview:
    """Fetch a page and its blocks and render them.

    Either fetch failing raises NotionAPIError; there is no partial preview.
    """
    page = await client.get_page(page_id)
    blocks = await client.get_block_children(page_id)
    logger.debug("Rendering %d blocks for page %s", len(blocks), page_id)

    return PagePreview(
        title=page_title(page),
        html=blocks_to_html(blocks),
        icon=page_icon(page),
        cover=page_cover(page),
    )
