"""Map between Notion database pages and dashboard content items."""

from datetime import date

from content_vault.content.models import ContentItem, CreateContentRequest, FilterOptions
from content_vault.notion.property_parser import (
    UNTITLED,
    checkbox_value,
    date_start,
    first_plain_text,
    multi_select_names,
    select_name,
    url_value,
)


def page_to_item(page: dict) -> ContentItem:
    """Reshape a raw Notion page from the content database."""
    properties = page.get("properties") or {}

    title = (
        first_plain_text(properties.get("Title"), "title")
        or first_plain_text(properties.get("Name"), "title")
        or UNTITLED
    )

    return ContentItem(
        id=page["id"],
        title=title,
        url=url_value(properties.get("URL")),
        type=select_name(properties.get("Type")),
        source=select_name(properties.get("Source")),
        status=select_name(properties.get("Status")) or "Inbox",
        date_added=date_start(properties.get("Date Added")) or page.get("created_time"),
        tags=multi_select_names(properties.get("Tags")),
        priority=select_name(properties.get("Priority")),
        notes=first_plain_text(properties.get("Notes"), "rich_text"),
        favorite=checkbox_value(properties.get("Favorite")),
        notion_url=page.get("url"),
    )


def _distinct(values) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def collect_filter_options(items: list[ContentItem]) -> FilterOptions:
    return FilterOptions(
        types=_distinct(item.type for item in items),
        sources=_distinct(item.source for item in items),
        statuses=_distinct(item.status for item in items),
    )


def _text(value: str) -> list[dict]:
    return [{"type": "text", "text": {"content": value}}]


def build_create_properties(request: CreateContentRequest, *, today: date | None = None) -> dict:
    """Build the Notion ``properties`` payload for a new content item."""
    today = today or date.today()
    properties: dict = {
        "Title": {"title": _text(request.title or "")},
        "Status": {"select": {"name": request.status or "Inbox"}},
        "Date Added": {"date": {"start": today.isoformat()}},
    }
    if request.url:
        properties["URL"] = {"url": request.url}
    if request.type:
        properties["Type"] = {"select": {"name": request.type}}
    if request.source:
        properties["Source"] = {"select": {"name": request.source}}
    if request.notes:
        properties["Notes"] = {"rich_text": _text(request.notes)}
    if request.tags:
        properties["Tags"] = {"multi_select": [{"name": t} for t in request.tags]}
    return properties


def build_update_properties(*, status: str | None = None, favorite: bool | None = None) -> dict:
    properties: dict = {}
    if status:
        properties["Status"] = {"select": {"name": status}}
    if favorite is not None:
        properties["Favorite"] = {"checkbox": favorite}
    return properties
