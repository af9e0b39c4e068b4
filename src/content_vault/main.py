"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from content_vault.api import deps
from content_vault.api.content import router as content_router
from content_vault.api.errors import install_error_handlers
from content_vault.api.markdown import router as markdown_router
from content_vault.api.preview import router as preview_router
from content_vault.config import Settings
from content_vault.markdown.fetcher import MarkdownFetcher
from content_vault.notion.client import NotionClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    notion_client = NotionClient(
        settings.notion_api_key,
        api_version=settings.notion_api_version,
        timeout=settings.http_timeout,
    )
    markdown_fetcher = MarkdownFetcher(timeout=settings.http_timeout)

    deps.configure(settings, notion_client, markdown_fetcher)
    if not settings.notion_database_id:
        logger.warning("NOTION_DATABASE_ID is not set; content routes will fail")

    logger.info("Content vault server started")
    yield

    await notion_client.close()
    await markdown_fetcher.close()
    logger.info("Content vault server stopped")


app = FastAPI(title="Content Vault", lifespan=lifespan)
install_error_handlers(app)
app.include_router(content_router)
app.include_router(preview_router)
app.include_router(markdown_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "content_vault.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
