"""Build Notion database query filters from dashboard filter parameters."""

from enum import Enum

ALL = "all"
DONE_STATUS = "Done"

DEFAULT_SORTS: list[dict] = [{"property": "Date Added", "direction": "descending"}]


class ReadMode(Enum):
    ALL = "all"
    UNREAD = "unread"  # anything not yet Done
    READ = "read"  # Done only


def _is_set(value: str | None) -> bool:
    return bool(value) and value != ALL


def _select_equals(prop: str, value: str) -> dict:
    return {"property": prop, "select": {"equals": value}}


def build_query_filter(
    *,
    type: str | None = None,
    status: str | None = None,
    source: str | None = None,
    search: str | None = None,
    favorite: bool = False,
    mode: ReadMode = ReadMode.ALL,
) -> dict | None:
    """Return a Notion ``filter`` object, or None when nothing is filtered."""
    conditions: list[dict] = []

    if _is_set(type):
        conditions.append(_select_equals("Type", type))
    if _is_set(status):
        conditions.append(_select_equals("Status", status))
    if _is_set(source):
        conditions.append(_select_equals("Source", source))
    if search:
        conditions.append({"property": "Title", "title": {"contains": search}})
    if favorite:
        conditions.append({"property": "Favorite", "checkbox": {"equals": True}})

    if mode is ReadMode.UNREAD:
        conditions.append({"property": "Status", "select": {"does_not_equal": DONE_STATUS}})
    elif mode is ReadMode.READ:
        conditions.append(_select_equals("Status", DONE_STATUS))

    if not conditions:
        return None
    return {"and": conditions}
