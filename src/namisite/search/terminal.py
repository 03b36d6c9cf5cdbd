"""Interactive terminal search over the site index."""

import sys
from pathlib import Path
from typing import Callable

import requests

from namisite.core.models import SearchRecord
from .index import load_search_index
from .session import SearchSession, SearchState, SearchStatus

CATEGORY_LABELS = {
    "rule": "Rule",
    "wiki": "Wiki",
    "news": "News",
}

CLOSE_COMMANDS = (":close", "\x1b")
QUIT_COMMANDS = ("quit", "exit", ":q")


class Colors:
    """ANSI codes for the terminal search surface."""

    PROMPT = "\033[36m"
    TITLE = "\033[33m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    RESET = "\033[0m"


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def file_loader(path: Path) -> Callable[[], list[SearchRecord]]:
    """Loader reading the static index artifact."""
    return lambda: load_search_index(path)


def url_loader(url: str, timeout: float = 10.0) -> Callable[[], list[SearchRecord]]:
    """Loader fetching the index from the search API."""

    def load() -> list[SearchRecord]:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return [SearchRecord.from_dict(item) for item in response.json()]

    return load


def format_results(session: SearchSession) -> list[str]:
    """Render the current session state as output lines."""
    if session.status is SearchStatus.EMPTY:
        return [f"{Colors.DIM}Type a keyword to search{Colors.RESET}"]
    if session.status is SearchStatus.NO_MATCHES:
        return [f"{Colors.DIM}No results for \"{session.query}\"{Colors.RESET}"]

    lines = []
    for record in session.results:
        lines.append(
            f"  {Colors.TITLE}{record.title}{Colors.RESET} "
            f"[{category_label(record.category)}] {Colors.DIM}{record.path}{Colors.RESET}"
        )
        if record.description:
            lines.append(f"    {record.description}")
    return lines


def interactive_mode(session: SearchSession, input_fn: Callable[[str], str] = input) -> None:
    """Filter the index as the user types queries, until they quit.

    Args:
        session: Search session to drive
        input_fn: Line reader, ``input`` by default
    """
    print(f"{Colors.PROMPT}Nami Server search{Colors.RESET}")
    print(f"Results are capped at {session.limit}. Type ':close' or Esc to clear, 'quit' to stop.\n")

    session.open()
    if session.state is not SearchState.READY:
        print(f"{Colors.RED}Failed to load search data{Colors.RESET}", file=sys.stderr)

    while True:
        try:
            line = input_fn("Search: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        command = line.strip()
        if command.lower() in QUIT_COMMANDS:
            break
        if command in CLOSE_COMMANDS:
            session.close()
            session.open()
            continue

        session.set_query(line)
        for output in format_results(session):
            print(output)
        print()

    session.close()
