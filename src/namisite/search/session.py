"""Substring filter and index fetch lifecycle for the search surface."""

import logging
from enum import Enum
from typing import Callable

from namisite.core.config import DEFAULT_RESULT_LIMIT
from namisite.core.models import SearchRecord

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    """Index acquisition state."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class SearchStatus(str, Enum):
    """What the result area should show."""

    EMPTY = "empty"            # Nothing typed yet
    NO_MATCHES = "no_matches"  # Typed, nothing found
    MATCHES = "matches"


def filter_records(
    records: list[SearchRecord],
    query: str,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> list[SearchRecord]:
    """Case-insensitive substring match over title, description and content.

    A blank query matches nothing. At most ``limit`` records are returned,
    in index order.
    """
    if not query.strip():
        return []

    term = query.lower()
    matches = []
    for record in records:
        if (
            term in record.title.lower()
            or term in record.description.lower()
            or term in record.content.lower()
        ):
            matches.append(record)
            if len(matches) >= limit:
                break
    return matches


class SearchSession:
    """Search surface state: loaded index, query and current results.

    The index is fetched at most once per session, the first time the
    surface is opened. Closing clears the query and results but keeps the
    index.
    """

    def __init__(
        self,
        loader: Callable[[], list[SearchRecord]],
        limit: int = DEFAULT_RESULT_LIMIT,
    ):
        """Initialize the session.

        Args:
            loader: Callable returning the full index
            limit: Maximum number of results to show
        """
        self._loader = loader
        self.limit = limit
        self.state = SearchState.IDLE
        self.index: list[SearchRecord] = []
        self.is_open = False
        self.query = ""
        self.results: list[SearchRecord] = []

    def open(self) -> None:
        """Show the surface, loading the index if it is not loaded yet."""
        self.is_open = True
        if self.state is SearchState.IDLE:
            self._load()

    def _load(self) -> None:
        self.state = SearchState.LOADING
        try:
            records = self._loader()
        except Exception:
            logger.exception("Failed to load search data")
            self.state = SearchState.IDLE
            return

        self.index = list(records)
        self.state = SearchState.READY
        # A load finishing after close() keeps the index but shows nothing
        if self.is_open:
            self._refresh()

    def set_query(self, text: str) -> list[SearchRecord]:
        """Update the query and synchronously recompute results."""
        self.query = text
        self._refresh()
        return self.results

    def _refresh(self) -> None:
        self.results = filter_records(self.index, self.query, self.limit)

    def close(self) -> None:
        """Hide the surface and reset query state; the index is kept."""
        self.is_open = False
        self.query = ""
        self.results = []

    @property
    def status(self) -> SearchStatus:
        if not self.query.strip():
            return SearchStatus.EMPTY
        if not self.results:
            return SearchStatus.NO_MATCHES
        return SearchStatus.MATCHES
