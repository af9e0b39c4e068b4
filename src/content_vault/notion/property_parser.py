"""Read Notion property values into plain Python types.

Each reader looks a column up by the shape the dashboard expects and returns
None (or [] / False) when the column is empty or holds another Notion type.
"""

import logging

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def _payload(prop: dict | None, key: str):
    if not isinstance(prop, dict):
        return None
    if key not in prop and prop.get("type") not in (None, key):
        logger.debug("Expected a %s property, got %s", key, prop.get("type"))
    return prop.get(key)


def first_plain_text(prop: dict | None, key: str) -> str | None:
    """Return the first run's plain text of a title/rich_text property."""
    runs = _payload(prop, key)
    if isinstance(runs, list) and runs and isinstance(runs[0], dict):
        return runs[0].get("plain_text") or None
    return None


def select_name(prop: dict | None) -> str | None:
    sel = _payload(prop, "select")
    if isinstance(sel, dict) and isinstance(sel.get("name"), str):
        return sel["name"] or None
    return None


def multi_select_names(prop: dict | None) -> list[str]:
    items = _payload(prop, "multi_select")
    if not isinstance(items, list):
        return []
    return [
        item["name"]
        for item in items
        if isinstance(item, dict) and isinstance(item.get("name"), str)
    ]


def url_value(prop: dict | None) -> str | None:
    url = _payload(prop, "url")
    return url if isinstance(url, str) and url else None


def checkbox_value(prop: dict | None) -> bool:
    return _payload(prop, "checkbox") is True


def date_start(prop: dict | None) -> str | None:
    date_obj = _payload(prop, "date")
    if isinstance(date_obj, dict) and isinstance(date_obj.get("start"), str):
        return date_obj["start"]
    return None


def page_title(page: dict) -> str:
    """Resolve a page's display title: ``title`` property, then ``Name``."""
    properties = page.get("properties") or {}
    prop = properties.get("title") or properties.get("Name")
    return first_plain_text(prop, "title") or UNTITLED


def page_icon(page: dict) -> str | None:
    return (page.get("icon") or {}).get("emoji") or None


def page_cover(page: dict) -> str | None:
    cover = page.get("cover") or {}
    return (cover.get("external") or {}).get("url") or (cover.get("file") or {}).get("url") or None
