#!/usr/bin/env python3
"""CLI for generating the static search index during the site build."""

import argparse
import sys
from pathlib import Path

from namisite.content import ContentStore
from namisite.core import load_config
from namisite.search import SearchIndexError, generate_search_index
from namisite.search.terminal import Colors


def main():
    parser = argparse.ArgumentParser(
        description="Generate public/search.json from the markdown content tree"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to site config (default: config/site.yaml)"
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        help="Markdown content root (overrides config)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: <public_dir>/search.json)"
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        sys.exit(1)

    store = ContentStore(args.content_dir or config.content_dir)
    output_path = args.output or config.search_index_path

    try:
        records = generate_search_index(store, output_path)
    except SearchIndexError as e:
        print(f"{Colors.RED}Failed to generate search index: {e}{Colors.RESET}", file=sys.stderr)
        sys.exit(1)

    print(f"{Colors.GREEN}Search index generated successfully.{Colors.RESET} "
          f"{len(records)} records -> {output_path}")


if __name__ == "__main__":
    main()
