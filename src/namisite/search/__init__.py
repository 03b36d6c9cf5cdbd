"""Search index building and substring filtering."""

from .index import (
    INDEX_CATEGORIES,
    STATIC_PAGES,
    SearchIndexError,
    build_search_index,
    document_to_record,
    generate_search_index,
    load_search_index,
    write_search_index,
)
from .session import SearchSession, SearchState, SearchStatus, filter_records

__all__ = [
    # Index
    "INDEX_CATEGORIES",
    "STATIC_PAGES",
    "SearchIndexError",
    "build_search_index",
    "document_to_record",
    "generate_search_index",
    "load_search_index",
    "write_search_index",
    # Session
    "SearchSession",
    "SearchState",
    "SearchStatus",
    "filter_records",
]
