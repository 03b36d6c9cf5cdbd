"""Domain dataclasses for site content."""

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

DEFAULT_ORDER = 99


class Category(str, Enum):
    """Routed content category.

    The value is the published label used in routes and search records.
    Rules live in a ``rules`` directory but are published as ``rule``.
    """

    RULE = "rule"
    WIKI = "wiki"
    NEWS = "news"

    @property
    def directory(self) -> str:
        """Name of the source directory under the content root."""
        return _DIRECTORIES[self]

    @property
    def route(self) -> str:
        return f"/{self.value}"

    def path_for(self, slug: str) -> str:
        return f"/{self.value}/{slug}"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category | None":
        """Resolve a label or directory name to a Category, or None."""
        if isinstance(value, Category):
            return value
        for category in cls:
            if value in (category.value, category.directory):
                return category
        return None


_DIRECTORIES = {
    Category.RULE: "rules",
    Category.WIKI: "wiki",
    Category.NEWS: "news",
}

# Keys with a typed slot on DocumentMeta; everything else goes to ``extra``.
KNOWN_META_KEYS = ("title", "description", "tags", "order")


def _as_text(value: Any) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    # YAML turns unquoted 2025-04-02 into a date; keep the author's text
    if isinstance(value, (str, int, float, date)):
        return str(value)
    return None


def _as_tags(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set)):
        return [str(tag) for tag in value if tag is not None]
    text = _as_text(value)
    return [text] if text else []


def _as_order(value: Any) -> int:
    if isinstance(value, bool):
        return DEFAULT_ORDER
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return DEFAULT_ORDER
    return DEFAULT_ORDER


@dataclass
class DocumentMeta:
    """Typed frontmatter with an open-ended ``extra`` mapping for unknown keys."""

    title: str | None = None
    description: str | None = None
    tags: list[str] = field(default_factory=list)
    order: int = DEFAULT_ORDER
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "DocumentMeta":
        """Build metadata from a raw frontmatter mapping.

        Known keys with a value of the wrong shape are treated as absent.
        """
        data = data or {}
        return cls(
            title=_as_text(data.get("title")),
            description=_as_text(data.get("description")),
            tags=_as_tags(data.get("tags")),
            order=_as_order(data.get("order")),
            extra={str(k): v for k, v in data.items() if k not in KNOWN_META_KEYS},
        )

    def title_or(self, fallback: str) -> str:
        return self.title or fallback

    def as_dict(self, slug: str) -> dict[str, Any]:
        """Flatten into a single mapping; typed fields win over ``extra``."""
        return {
            **self.extra,
            "title": self.title_or(slug),
            "description": self.description,
            "tags": list(self.tags),
            "order": self.order,
            "slug": slug,
        }


@dataclass
class Document:
    """One markdown file: metadata plus raw body."""

    slug: str
    category: Category
    meta: DocumentMeta
    body: str
    source_path: Path | None = None

    @property
    def title(self) -> str:
        return self.meta.title_or(self.slug)

    @property
    def path(self) -> str:
        return self.category.path_for(self.slug)


@dataclass
class ListingEntry:
    """Metadata-only summary of a document, used in category listings."""

    slug: str
    category: Category
    meta: DocumentMeta

    @property
    def title(self) -> str:
        return self.meta.title_or(self.slug)

    @property
    def order(self) -> int:
        return self.meta.order

    @property
    def tags(self) -> list[str]:
        return self.meta.tags

    def as_dict(self) -> dict[str, Any]:
        return self.meta.as_dict(self.slug)


@dataclass
class Article:
    """A document's metadata plus its rendered HTML."""

    slug: str
    category: Category
    meta: DocumentMeta
    content_html: str

    @property
    def title(self) -> str:
        return self.meta.title_or(self.slug)

    def as_dict(self) -> dict[str, Any]:
        data = self.meta.as_dict(self.slug)
        data["contentHtml"] = self.content_html
        return data


@dataclass
class SearchRecord:
    """Flattened search projection of a document or static page.

    ``content`` holds the raw markdown body and is only used for matching.
    """

    title: str
    description: str
    category: str
    slug: str
    path: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchRecord":
        slug = str(data.get("slug") or "")
        return cls(
            title=str(data.get("title") or slug),
            description=str(data.get("description") or ""),
            category=str(data.get("category") or ""),
            slug=slug,
            path=str(data.get("path") or ""),
            content=str(data.get("content") or ""),
        )
