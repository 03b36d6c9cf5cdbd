#!/usr/bin/env python3
"""CLI for searching site content from the terminal."""

import argparse
import sys
from pathlib import Path

from namisite.core import load_config
from namisite.search import SearchSession, SearchState
from namisite.search.terminal import (
    Colors,
    file_loader,
    format_results,
    interactive_mode,
    url_loader,
)


def main():
    parser = argparse.ArgumentParser(
        description="Search rules, wiki and news (omit query for interactive mode)"
    )
    parser.add_argument(
        "query",
        nargs="?",
        help="Search keyword"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--index",
        type=Path,
        help="Static index file (default: <public_dir>/search.json)"
    )
    source.add_argument(
        "--url",
        help="Search API URL, e.g. http://127.0.0.1:8000/api/search"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to site config (default: config/site.yaml)"
    )

    args = parser.parse_args()
    config = load_config(args.config)

    loader = url_loader(args.url) if args.url else file_loader(args.index or config.search_index_path)
    session = SearchSession(loader, limit=config.result_limit)

    if args.query is None:
        interactive_mode(session)
        return

    session.open()
    if session.state is not SearchState.READY:
        print(f"{Colors.RED}Error: failed to load search data{Colors.RESET}", file=sys.stderr)
        sys.exit(1)

    session.set_query(args.query)
    for line in format_results(session):
        print(line)


if __name__ == "__main__":
    main()
