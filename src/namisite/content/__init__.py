"""Markdown content pipeline: frontmatter, rendering, listings and articles."""

from .frontmatter import parse_frontmatter, split_frontmatter
from .renderer import (
    HeadingAnchorExtension,
    MarkdownRenderer,
    render_markdown,
    slugify_heading,
    unique_anchor,
)
from .store import (
    ContentStore,
    collect_tags,
    filter_by_tag,
    is_safe_slug,
    slug_from_filename,
)

__all__ = [
    # Frontmatter
    "parse_frontmatter",
    "split_frontmatter",
    # Renderer
    "HeadingAnchorExtension",
    "MarkdownRenderer",
    "render_markdown",
    "slugify_heading",
    "unique_anchor",
    # Store
    "ContentStore",
    "collect_tags",
    "filter_by_tag",
    "is_safe_slug",
    "slug_from_filename",
]
