"""Markdown to HTML rendering with stable heading anchors."""

import html
import re
import xml.etree.ElementTree as etree

import markdown
from markdown.extensions import Extension
from markdown.extensions.toc import render_inner_html, strip_tags
from markdown.treeprocessors import Treeprocessor

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
FALLBACK_ANCHOR = "section"

_SEPARATOR_RE = re.compile(r"[\W_]+", re.UNICODE)

MD_EXTENSIONS = [
    "tables",
    "fenced_code",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

MD_EXTENSION_CONFIGS = {
    # GFM strikethrough only; no ~subscript~
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
}


def slugify_heading(text: str) -> str:
    """Derive an anchor id from heading text.

    Lowercases and collapses every run of non-alphanumeric characters to a
    single ``-``. Non-ASCII letters and digits are kept.
    """
    slug = _SEPARATOR_RE.sub("-", text.strip().lower()).strip("-")
    return slug or FALLBACK_ANCHOR


def unique_anchor(slug: str, used: set[str]) -> str:
    """Return ``slug`` or ``slug-N`` with the smallest N not yet used."""
    candidate = slug
    n = 0
    while candidate in used:
        n += 1
        candidate = f"{slug}-{n}"
    used.add(candidate)
    return candidate


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Assign a unique id to every heading in document order."""

    def heading_text(self, el: etree.Element) -> str:
        # Same text extraction the toc extension uses for its ids
        return html.unescape(strip_tags(render_inner_html(el, self.md)))

    def run(self, root: etree.Element) -> None:
        used: set[str] = set()
        headings = [el for el in root.iter() if el.tag in HEADING_TAGS]

        # Explicit ids are kept as-is and reserved before deriving new ones
        for el in headings:
            if el.get("id"):
                used.add(el.get("id"))

        for el in headings:
            if el.get("id"):
                continue
            el.set("id", unique_anchor(slugify_heading(self.heading_text(el)), used))


class HeadingAnchorExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # After inline processing (20), before prettify (10)
        md.treeprocessors.register(HeadingAnchorTreeprocessor(md), "heading_anchor", 15)


class MarkdownRenderer:
    """Converts markdown bodies to HTML.

    Every call builds a fresh parser so output depends only on the input
    text and the raw-HTML policy.
    """

    def __init__(self, allow_raw_html: bool = True):
        """Initialize the renderer.

        Args:
            allow_raw_html: Pass raw HTML in the source through unchanged.
                When False, HTML blocks and inline tags are escaped.
        """
        self.allow_raw_html = allow_raw_html

    def _build(self) -> markdown.Markdown:
        md = markdown.Markdown(
            extensions=[*MD_EXTENSIONS, HeadingAnchorExtension()],
            extension_configs=MD_EXTENSION_CONFIGS,
            output_format="html",
        )
        if not self.allow_raw_html:
            md.preprocessors.deregister("html_block")
            md.inlinePatterns.deregister("html")
        return md

    def render(self, body: str) -> str:
        return self._build().convert(body)


def render_markdown(body: str, allow_raw_html: bool = True) -> str:
    """Render a markdown body to an HTML string."""
    return MarkdownRenderer(allow_raw_html=allow_raw_html).render(body)
