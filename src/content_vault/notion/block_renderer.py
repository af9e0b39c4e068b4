"""Convert Notion blocks to preview HTML.

Rendering is flat: each top-level block becomes one fragment and fragments
are joined with no separator. List items are not regrouped into <ul>/<ol>,
toggle bodies are not fetched, and child pages/databases are shown as
placeholders. Anything this module does not recognize renders as "".
"""

import logging
from collections.abc import Callable
from enum import Enum
from html import escape

logger = logging.getLogger(__name__)

DEFAULT_CALLOUT_ICON = "💡"
UNTITLED = "Untitled"


class BlockKind(Enum):
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    QUOTE = "quote"
    CALLOUT = "callout"
    CODE = "code"
    DIVIDER = "divider"
    IMAGE = "image"
    BOOKMARK = "bookmark"
    LINK_PREVIEW = "link_preview"
    CHILD_DATABASE = "child_database"
    CHILD_PAGE = "child_page"
    UNKNOWN = "unknown"

    @classmethod
    def from_type(cls, block_type: str | None) -> "BlockKind":
        try:
            return cls(block_type)
        except ValueError:
            return cls.UNKNOWN


def _attr(value: str) -> str:
    return escape(value, quote=True)


def rich_text_to_html(rich_texts: list[dict] | None) -> str:
    """Convert a Notion rich text array to an HTML string.

    Text is escaped for &, < and > first, then wrapped bold, italic,
    strikethrough, underline, code (innermost to outermost), and finally
    in an anchor when the run has an href.
    """
    if not rich_texts:
        return ""

    parts = []
    for rt in rich_texts:
        text = escape(rt.get("plain_text") or "", quote=False)
        annotations = rt.get("annotations") or {}
        href = rt.get("href")

        if annotations.get("bold"):
            text = f"<strong>{text}</strong>"
        if annotations.get("italic"):
            text = f"<em>{text}</em>"
        if annotations.get("strikethrough"):
            text = f"<del>{text}</del>"
        if annotations.get("underline"):
            text = f"<u>{text}</u>"
        if annotations.get("code"):
            text = f'<code class="inline-code">{text}</code>'
        if href:
            text = (
                f'<a href="{_attr(href)}" target="_blank" '
                f'rel="noopener noreferrer" class="link">{text}</a>'
            )

        parts.append(text)
    return "".join(parts)


def _render_paragraph(data: dict) -> str:
    content = rich_text_to_html(data.get("rich_text"))
    # Keep empty paragraphs visible as blank lines.
    return f'<p class="block-paragraph">{content or "&nbsp;"}</p>'


def _heading(level: int) -> Callable[[dict], str]:
    def render(data: dict) -> str:
        content = rich_text_to_html(data.get("rich_text"))
        return f'<h{level} class="block-heading-{level}">{content}</h{level}>'

    return render


def _render_bulleted_list_item(data: dict) -> str:
    return f'<li class="block-list-item">• {rich_text_to_html(data.get("rich_text"))}</li>'


def _render_numbered_list_item(data: dict) -> str:
    return f'<li class="block-list-item">{rich_text_to_html(data.get("rich_text"))}</li>'


def _render_to_do(data: dict) -> str:
    mark = "☑" if data.get("checked") else "☐"
    return f'<div class="block-todo">{mark} {rich_text_to_html(data.get("rich_text"))}</div>'


def _render_toggle(data: dict) -> str:
    summary = rich_text_to_html(data.get("rich_text"))
    return f'<details class="block-toggle"><summary>{summary}</summary></details>'


def _render_quote(data: dict) -> str:
    return (
        f'<blockquote class="block-quote">'
        f'{rich_text_to_html(data.get("rich_text"))}</blockquote>'
    )


def _render_callout(data: dict) -> str:
    icon = (data.get("icon") or {}).get("emoji") or DEFAULT_CALLOUT_ICON
    return (
        f'<div class="block-callout"><span class="callout-icon">{escape(icon, quote=False)}</span>'
        f'<span>{rich_text_to_html(data.get("rich_text"))}</span></div>'
    )


def _render_code(data: dict) -> str:
    return f'<pre class="block-code"><code>{rich_text_to_html(data.get("rich_text"))}</code></pre>'


def _render_divider(data: dict) -> str:
    return '<hr class="block-divider" />'


def _render_image(data: dict) -> str:
    url = (data.get("file") or {}).get("url") or (data.get("external") or {}).get("url")
    if not url:
        return ""
    return f'<img src="{_attr(url)}" alt="" class="block-image" />'


def _render_link(data: dict) -> str:
    url = data.get("url")
    if not url:
        return ""
    return (
        f'<a href="{_attr(url)}" target="_blank" rel="noopener noreferrer" '
        f'class="block-bookmark">{escape(url, quote=False)}</a>'
    )


def _placeholder(glyph: str, label: str) -> Callable[[dict], str]:
    def render(data: dict) -> str:
        title = escape(data.get("title") or UNTITLED, quote=False)
        return f'<div class="block-child">{glyph} {label}: {title}</div>'

    return render


_RENDERERS: dict[BlockKind, Callable[[dict], str]] = {
    BlockKind.PARAGRAPH: _render_paragraph,
    BlockKind.HEADING_1: _heading(1),
    BlockKind.HEADING_2: _heading(2),
    BlockKind.HEADING_3: _heading(3),
    BlockKind.BULLETED_LIST_ITEM: _render_bulleted_list_item,
    BlockKind.NUMBERED_LIST_ITEM: _render_numbered_list_item,
    BlockKind.TO_DO: _render_to_do,
    BlockKind.TOGGLE: _render_toggle,
    BlockKind.QUOTE: _render_quote,
    BlockKind.CALLOUT: _render_callout,
    BlockKind.CODE: _render_code,
    BlockKind.DIVIDER: _render_divider,
    BlockKind.IMAGE: _render_image,
    BlockKind.BOOKMARK: _render_link,
    BlockKind.LINK_PREVIEW: _render_link,
    BlockKind.CHILD_DATABASE: _placeholder("📊", "Database"),
    BlockKind.CHILD_PAGE: _placeholder("📄", "Page"),
}


def block_to_html(block: dict) -> str:
    """Convert a single Notion block to an HTML fragment."""
    block_type = block.get("type")
    renderer = _RENDERERS.get(BlockKind.from_type(block_type))
    if renderer is None:
        logger.debug("Unsupported Notion block type: %s", block_type)
        return ""
    data = block.get(block_type)
    return renderer(data if isinstance(data, dict) else {})


def blocks_to_html(blocks: list[dict]) -> str:
    """Render a sequence of Notion blocks into one HTML string."""
    return "".join(block_to_html(block) for block in blocks)
