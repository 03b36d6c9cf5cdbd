"""Web API for the Nami Server content site."""

from namisite.web.app import app
from namisite.web.models import (
    ArticleResponse,
    ErrorResponse,
    HealthResponse,
    ListingEntryResponse,
    SearchRecordResponse,
    TagsResponse,
)

__all__ = [
    "app",
    "ArticleResponse",
    "ErrorResponse",
    "HealthResponse",
    "ListingEntryResponse",
    "SearchRecordResponse",
    "TagsResponse",
]
