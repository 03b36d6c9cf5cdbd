"""Shared fixtures for building temporary content trees."""

from pathlib import Path

import pytest
import yaml


def _write_doc(root: Path, directory: str, slug: str, meta: dict | None = None, body: str = "") -> Path:
    """Write a markdown file with optional YAML frontmatter."""
    dir_path = root / directory
    dir_path.mkdir(parents=True, exist_ok=True)
    text = body
    if meta is not None:
        text = f"---\n{yaml.safe_dump(meta, allow_unicode=True)}---\n{body}"
    path = dir_path / f"{slug}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_doc():
    """Helper for writing documents: write_doc(root, directory, slug, meta, body)."""
    return _write_doc


@pytest.fixture
def content_root(tmp_path):
    """Empty content root."""
    root = tmp_path / "_content"
    root.mkdir()
    return root


@pytest.fixture
def populated_root(content_root):
    """Content root with a few documents in every category."""
    _write_doc(content_root, "rules", "general", {"title": "General Rules", "order": 1},
               "# General\n\nBe kind to other players.\n")
    _write_doc(content_root, "rules", "pvp", {"title": "PvP Rules", "description": "Combat rules", "order": 2},
               "# PvP\n\nNo spawn killing.\n")
    _write_doc(content_root, "wiki", "getting-started",
               {"title": "Getting Started", "tags": ["basics"], "order": 1},
               "# Getting Started\n\nJoin with Java or Bedrock.\n")
    _write_doc(content_root, "wiki", "nations", {"title": "Nations", "tags": ["nation", "basics"]},
               "# Nations\n\nFound your own nation.\n")
    _write_doc(content_root, "news", "season-2", {"title": "Season 2", "date": "2025-04-01"},
               "# Season 2\n\nA new map is live.\n")
    return content_root
