"""Read-only access to the markdown content tree."""

import logging
from pathlib import Path
from typing import Iterator

from namisite.core.models import (
    Article,
    Category,
    Document,
    DocumentMeta,
    ListingEntry,
)
from .frontmatter import parse_frontmatter
from .renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def slug_from_filename(filename: str) -> str:
    """Strip the markdown extension from a file name."""
    return filename[: -len(MARKDOWN_SUFFIX)] if filename.endswith(MARKDOWN_SUFFIX) else filename


def is_safe_slug(slug: str) -> bool:
    """Check that a slug names a file directly inside its category directory."""
    return bool(slug) and not slug.startswith(".") and "/" not in slug and "\\" not in slug and "\0" not in slug


class ContentStore:
    """Markdown documents grouped by category under a content root.

    Layout::

        {root}/rules/*.md
        {root}/wiki/*.md
        {root}/news/*.md

    Nothing is cached; every call reads from disk.
    """

    def __init__(self, root: str | Path, renderer: MarkdownRenderer | None = None):
        """Initialize the store.

        Args:
            root: Content root directory
            renderer: Renderer used for articles, defaults to MarkdownRenderer()
        """
        self.root = Path(root)
        self.renderer = renderer or MarkdownRenderer()

    def category_dir(self, category: Category) -> Path:
        return self.root / category.directory

    def _markdown_files(self, category: Category) -> list[Path]:
        dir_path = self.category_dir(category)
        if not dir_path.is_dir():
            return []
        # Only files whose slug get_article() can resolve; sorted so
        # enumeration does not depend on the platform
        return sorted(
            p for p in dir_path.iterdir()
            if p.name.endswith(MARKDOWN_SUFFIX)
            and is_safe_slug(slug_from_filename(p.name))
            and p.is_file()
        )

    def _read_document(self, category: Category, path: Path) -> Document:
        text = path.read_text(encoding="utf-8")
        data, body = parse_frontmatter(text, source=str(path))
        return Document(
            slug=slug_from_filename(path.name),
            category=category,
            meta=DocumentMeta.from_mapping(data),
            body=body,
            source_path=path,
        )

    def iter_documents(self, category: Category) -> Iterator[Document]:
        """Yield every document in a category.

        A missing category directory yields nothing. Read and decode errors
        propagate to the caller.
        """
        for path in self._markdown_files(category):
            yield self._read_document(category, path)

    def load_document(self, category: Category, slug: str) -> Document | None:
        """Load a single document, or None if it does not exist."""
        if not is_safe_slug(slug):
            return None
        path = self.category_dir(category) / f"{slug}{MARKDOWN_SUFFIX}"
        if not path.is_file():
            return None
        return self._read_document(category, path)

    def list_entries(self, category: Category) -> list[ListingEntry]:
        """List a category's documents as metadata-only entries.

        Sorted by ascending ``order`` (missing order is 99); equal orders
        keep slug order.
        """
        entries = [
            ListingEntry(slug=doc.slug, category=category, meta=doc.meta)
            for doc in self.iter_documents(category)
        ]
        entries.sort(key=lambda entry: (entry.order, entry.slug))
        return entries

    def get_article(self, category: Category, slug: str) -> Article | None:
        """Resolve and render one document, or None if it does not exist."""
        doc = self.load_document(category, slug)
        if doc is None:
            logger.debug("No %s document for slug %r", category.value, slug)
            return None
        return Article(
            slug=doc.slug,
            category=category,
            meta=doc.meta,
            content_html=self.renderer.render(doc.body),
        )


def collect_tags(entries: list[ListingEntry]) -> list[str]:
    """Return the sorted set of tags used across entries."""
    return sorted({tag for entry in entries for tag in entry.tags})


def filter_by_tag(entries: list[ListingEntry], tag: str | None) -> list[ListingEntry]:
    """Keep entries carrying ``tag``; no tag means no filtering."""
    if not tag:
        return list(entries)
    return [entry for entry in entries if tag in entry.tags]
