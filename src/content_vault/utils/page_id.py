import re

# Tried in order; the first match wins.
_PAGE_ID_PATTERNS = [
    # https://www.notion.so/workspace/Page-Title-<32 hex>
    re.compile(r"notion\.so/(?:[^/]+/)?(?:[^-]+-)?([a-f0-9]{32})", re.IGNORECASE),
    # https://someone.notion.site/Page-Title-<32 hex>
    re.compile(r"notion\.site/(?:[^-]+-)?([a-f0-9]{32})", re.IGNORECASE),
    # Already dashed UUID anywhere in the string
    re.compile(
        r"([a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12})",
        re.IGNORECASE,
    ),
    # Bare 32 hex block anywhere in the string
    re.compile(r"([a-f0-9]{32})", re.IGNORECASE),
]


def format_page_id(raw: str) -> str:
    """Insert dashes into a 32-character hex id to get the 8-4-4-4-12 form."""
    return f"{raw[:8]}-{raw[8:12]}-{raw[12:16]}-{raw[16:20]}-{raw[20:]}"


def extract_page_id(url: str) -> str | None:
    """Extract a Notion page id from a URL or free-form string.

    Accepts strings like:
        https://www.notion.so/workspace/Page-Title-1234567890abcdef1234567890abcdef
        https://www.notion.so/1234567890abcdef1234567890abcdef
        https://someone.notion.site/Page-Title-1234567890abcdef1234567890abcdef
        12345678-90ab-cdef-1234-567890abcdef

    Dashed ids are returned as found; undashed ones are reformatted.
    """
    for pattern in _PAGE_ID_PATTERNS:
        m = pattern.search(url)
        if m:
            value = m.group(1)
            if "-" in value:
                return value
            return format_page_id(value)
    return None
