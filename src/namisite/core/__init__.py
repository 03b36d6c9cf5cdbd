"""Core domain models and configuration."""

from .config import SiteConfig, load_config
from .models import (
    DEFAULT_ORDER,
    Article,
    Category,
    Document,
    DocumentMeta,
    ListingEntry,
    SearchRecord,
)

__all__ = [
    "Article",
    "Category",
    "DEFAULT_ORDER",
    "Document",
    "DocumentMeta",
    "ListingEntry",
    "SearchRecord",
    "SiteConfig",
    "load_config",
]
