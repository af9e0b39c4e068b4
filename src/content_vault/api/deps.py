"""Collaborators shared by the route handlers.

Populated once by the application lifespan; tests replace the getters via
``app.dependency_overrides``.
"""

from content_vault.config import Settings
from content_vault.markdown.fetcher import MarkdownFetcher
from content_vault.notion.client import NotionClient

_settings: Settings | None = None
_notion_client: NotionClient | None = None
_markdown_fetcher: MarkdownFetcher | None = None


def configure(
    settings: Settings,
    notion_client: NotionClient,
    markdown_fetcher: MarkdownFetcher,
) -> None:
    global _settings, _notion_client, _markdown_fetcher
    _settings = settings
    _notion_client = notion_client
    _markdown_fetcher = markdown_fetcher


def _require(value, name: str):
    if value is None:
        raise RuntimeError(f"{name} is not configured; was the app started via its lifespan?")
    return value


def get_settings() -> Settings:
    return _require(_settings, "Settings")


def get_notion_client() -> NotionClient:
    return _require(_notion_client, "Notion client")


def get_markdown_fetcher() -> MarkdownFetcher:
    return _require(_markdown_fetcher, "Markdown fetcher")
