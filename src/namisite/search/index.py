"""Search index construction shared by the API and the build step."""

import json
import logging
from pathlib import Path

from namisite.content import ContentStore
from namisite.core.models import Category, Document, SearchRecord

logger = logging.getLogger(__name__)

# Enumeration order of routed content in the index
INDEX_CATEGORIES = (Category.RULE, Category.WIKI, Category.NEWS)

STATIC_PAGE_CATEGORY = "page"

# Hand-maintained entries for routes that are not backed by markdown
STATIC_PAGES = (
    SearchRecord(
        title="ホーム (Home)",
        description="Nami Serverのトップページ。サーバーの概要、特徴、ミニゲームや国家サーバーの紹介。",
        category=STATIC_PAGE_CATEGORY,
        slug="home",
        path="/",
        content="なみサーバーとは？ クロスプレイ対応サーバー。TNTRUN, DUEL, INFINITY PARKOUR, 国家サーバー, 建国, 町づくり",
    ),
    SearchRecord(
        title="サーバーステータス (Status)",
        description="Nami Serverの現在の稼働状況を確認できます。",
        category=STATIC_PAGE_CATEGORY,
        slug="status",
        path="/status",
        content="サーバーステータス リアルタイム稼働状況 接続人数 ping",
    ),
    SearchRecord(
        title="Discord コミュニティ",
        description="Nami Serverの公式Discordコミュニティ。",
        category=STATIC_PAGE_CATEGORY,
        slug="discord",
        path="/discord",
        content="コミュニティに参加しよう 交流 サポート 最新情報",
    ),
    SearchRecord(
        title="国家サーバーマップ (Map)",
        description="国家サーバーのWebマップ。",
        category=STATIC_PAGE_CATEGORY,
        slug="map",
        path="http://nami-kokka-map.mcsv.win:3347/",
        content="Dynmap Bluemap Webマップ 地図 領土",
    ),
)


class SearchIndexError(Exception):
    """Raised when the search index cannot be built or written."""


def document_to_record(doc: Document) -> SearchRecord:
    """Project a document onto a search record.

    The category label always comes from the document's directory; a
    ``category`` key in frontmatter is ignored.
    """
    return SearchRecord(
        title=doc.title,
        description=doc.meta.description or "",
        category=doc.category.value,
        slug=doc.slug,
        path=doc.path,
        content=doc.body,
    )


def build_search_index(store: ContentStore, include_static_pages: bool = False) -> list[SearchRecord]:
    """Flatten all routed content into search records.

    Args:
        store: Content store to read from
        include_static_pages: Append STATIC_PAGES after routed content

    Returns:
        Records for rule, wiki and news (in that order), then static pages

    Raises:
        SearchIndexError: If any document cannot be read or decoded
    """
    records: list[SearchRecord] = []
    for category in INDEX_CATEGORIES:
        try:
            category_records = [document_to_record(doc) for doc in store.iter_documents(category)]
        except (OSError, UnicodeDecodeError) as e:
            raise SearchIndexError(f"Failed to read {category.value} content: {e}") from e
        logger.info("Indexed %d %s documents", len(category_records), category.value)
        records.extend(category_records)

    if include_static_pages:
        records.extend(STATIC_PAGES)

    return records


def write_search_index(records: list[SearchRecord], output_path: Path) -> None:
    """Write records as compact UTF-8 JSON, creating the parent directory."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(
        [record.as_dict() for record in records],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    output_path.write_text(payload, encoding="utf-8")


def generate_search_index(store: ContentStore, output_path: Path) -> list[SearchRecord]:
    """Build the full index, static pages included, and write it to disk.

    Raises:
        SearchIndexError: On any read, encode or write failure
    """
    records = build_search_index(store, include_static_pages=True)
    try:
        write_search_index(records, output_path)
    except (OSError, TypeError, ValueError) as e:
        raise SearchIndexError(f"Failed to write search index to {output_path}: {e}") from e
    logger.info("Wrote %d search records to %s", len(records), output_path)
    return records


def load_search_index(path: Path) -> list[SearchRecord]:
    """Load a previously generated index file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise SearchIndexError(f"Search index at {path} is not a list")
    return [SearchRecord.from_dict(item) for item in data]
