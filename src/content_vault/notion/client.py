import logging

import httpx

logger = logging.getLogger(__name__)

NOTION_API_BASE = "https://api.notion.com/v1"
NOTION_API_VERSION = "2022-06-28"


class NotionAPIError(Exception):
    """Raised when Notion answers with a non-success status or is unreachable.

    ``message`` carries Notion's own error text when the response body has
    one, otherwise the caller-supplied fallback.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _upstream_message(resp: httpx.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class NotionClient:
    def __init__(
        self,
        api_key: str,
        *,
        api_version: str = NOTION_API_VERSION,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=NOTION_API_BASE,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": api_version,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, fallback: str, **kwargs) -> dict:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            logger.warning("Notion request %s %s failed: %s", method, path, exc)
            raise NotionAPIError(fallback) from exc

        if resp.is_error:
            message = _upstream_message(resp) or fallback
            logger.warning(
                "Notion %s %s returned %s: %s", method, path, resp.status_code, message
            )
            raise NotionAPIError(message, resp.status_code)

        try:
            body = resp.json()
        except ValueError as exc:
            logger.warning("Notion %s %s returned a non-JSON body", method, path)
            raise NotionAPIError(fallback, resp.status_code) from exc
        if not isinstance(body, dict):
            logger.warning("Notion %s %s returned an unexpected body", method, path)
            raise NotionAPIError(fallback, resp.status_code)
        return body

    async def get_page(self, page_id: str) -> dict:
        return await self._request("GET", f"/pages/{page_id}", "Failed to fetch page")

    async def get_block_children(self, block_id: str) -> list[dict]:
        """Get the top-level child blocks of a block/page, handling pagination."""
        blocks = []
        cursor = None

        while True:
            params = {"page_size": 100}
            if cursor:
                params["start_cursor"] = cursor
            data = await self._request(
                "GET",
                f"/blocks/{block_id}/children",
                "Failed to fetch blocks",
                params=params,
            )
            blocks.extend(data.get("results", []))

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

        return blocks

    async def query_database(
        self,
        database_id: str,
        *,
        filter: dict | None = None,
        sorts: list[dict] | None = None,
        start_cursor: str | None = None,
        page_size: int = 100,
    ) -> dict:
        """Query a Notion database, returning one page of results."""
        body: dict = {"page_size": page_size}
        if filter:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts
        if start_cursor:
            body["start_cursor"] = start_cursor
        return await self._request(
            "POST",
            f"/databases/{database_id}/query",
            "Failed to query database",
            json=body,
        )

    async def query_all_pages(
        self,
        database_id: str,
        *,
        filter: dict | None = None,
        sorts: list[dict] | None = None,
    ) -> list[dict]:
        """Query all pages in a Notion database matching ``filter``."""
        pages = []
        cursor = None
        while True:
            result = await self.query_database(
                database_id, filter=filter, sorts=sorts, start_cursor=cursor
            )
            pages.extend(result.get("results", []))
            cursor = result.get("next_cursor")
            if not result.get("has_more") or not cursor:
                break
        return pages

    async def create_page(self, database_id: str, properties: dict) -> dict:
        body = {"parent": {"database_id": database_id}, "properties": properties}
        return await self._request("POST", "/pages", "Failed to create page", json=body)

    async def update_page(self, page_id: str, properties: dict) -> dict:
        return await self._request(
            "PATCH",
            f"/pages/{page_id}",
            "Failed to update page",
            json={"properties": properties},
        )

    async def archive_page(self, page_id: str) -> dict:
        """Move a page to the trash. Notion has no hard delete for pages."""
        return await self._request(
            "PATCH",
            f"/pages/{page_id}",
            "Failed to update page",
            json={"archived": True},
        )
