"""Pydantic models for the content triage API."""

from pydantic import BaseModel, Field


class ContentItem(BaseModel):
    """One row of the content database, reshaped for the dashboard."""

    model_config = {"populate_by_name": True}

    id: str
    title: str
    url: str | None = None
    type: str | None = None
    source: str | None = None
    status: str = "Inbox"
    date_added: str | None = Field(None, alias="dateAdded")
    tags: list[str] = Field(default_factory=list)
    priority: str | None = None
    notes: str | None = None
    favorite: bool = False
    notion_url: str | None = Field(None, alias="notionUrl")


class FilterOptions(BaseModel):
    """Distinct values present in the listed items, for the filter bar."""

    types: list[str]
    sources: list[str]
    statuses: list[str]


class ContentListResponse(BaseModel):
    items: list[ContentItem]
    filters: FilterOptions


class ContentItemResponse(BaseModel):
    item: ContentItem


class CreateContentRequest(BaseModel):
    # title is checked by the route so a missing one yields a 400, not a 422
    title: str | None = None
    url: str | None = None
    type: str | None = None
    source: str | None = None
    status: str = "Inbox"
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)


class UpdateContentRequest(BaseModel):
    id: str | None = None
    status: str | None = None
    favorite: bool | None = None
