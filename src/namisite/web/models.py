"""Pydantic models for the web API."""

from pydantic import BaseModel, ConfigDict, Field

from namisite import __version__


class ListingEntryResponse(BaseModel):
    """One entry of a category listing.

    Unrecognized frontmatter keys are passed through as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    slug: str
    title: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    order: int = 99


class ArticleResponse(ListingEntryResponse):
    """A rendered article."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    content_html: str = Field(..., alias="contentHtml")


class SearchRecordResponse(BaseModel):
    """Flattened search record."""

    title: str
    description: str
    category: str
    slug: str
    path: str
    content: str = Field(..., description="Raw markdown body, used for matching only")


class TagsResponse(BaseModel):
    """Tags used across a category."""

    category: str
    tags: list[str]


class ErrorResponse(BaseModel):
    """Generic error payload."""

    error: str


class HealthResponse(BaseModel):
    """Liveness payload with the site name and package version."""

    status: str = "ok"
    site: str
    version: str = __version__
