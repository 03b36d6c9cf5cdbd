"""FastAPI application for the Nami Server content site."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, JSONResponse

from namisite import __version__
from namisite.content import ContentStore, MarkdownRenderer, collect_tags, filter_by_tag
from namisite.core import Category, SiteConfig, load_config
from namisite.search import build_search_index, filter_records
from namisite.web.models import (
    ArticleResponse,
    ErrorResponse,
    HealthResponse,
    ListingEntryResponse,
    SearchRecordResponse,
    TagsResponse,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = "Failed to fetch search data"

# Global config and store, set up on startup
_config: SiteConfig | None = None
_store: ContentStore | None = None


def get_config() -> SiteConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_store() -> ContentStore:
    global _store
    if _store is None:
        config = get_config()
        _store = ContentStore(
            config.content_dir,
            renderer=MarkdownRenderer(allow_raw_html=config.allow_raw_html),
        )
    return _store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    global _config, _store
    _config = load_config()
    _store = None
    store = get_store()
    logger.info("Serving content from %s", store.root)
    if not store.root.is_dir():
        logger.warning("Content directory %s does not exist", store.root)
    yield
    _config = None
    _store = None


app = FastAPI(
    title="Nami Server Site API",
    description="Rules, wiki and news for the Nami Minecraft server",
    version=__version__,
    lifespan=lifespan,
)


def resolve_category(name: str) -> Category:
    """Map a route segment to a Category or raise 404."""
    category = Category.parse(name)
    if category is None:
        raise HTTPException(status_code=404, detail="Not found")
    return category


@app.get("/api/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(site=get_config().site_name)


@app.get(
    "/api/search",
    response_model=list[SearchRecordResponse],
    responses={500: {"model": ErrorResponse}},
)
def search_index(q: str | None = None):
    """Return the search index for rule, wiki and news, rebuilt per request.

    With ``q``, the same substring filter the search surface uses is
    applied server-side.
    """
    try:
        records = build_search_index(get_store(), include_static_pages=False)
    except Exception:
        logger.exception(SEARCH_ERROR_MESSAGE)
        return JSONResponse({"error": SEARCH_ERROR_MESSAGE}, status_code=500)

    if q is not None:
        records = filter_records(records, q, get_config().result_limit)
    return [SearchRecordResponse(**record.as_dict()) for record in records]


@app.get("/api/tags/{category}", response_model=TagsResponse)
def category_tags(category: str) -> TagsResponse:
    """List the tags used in a category, sorted."""
    resolved = resolve_category(category)
    entries = get_store().list_entries(resolved)
    return TagsResponse(category=resolved.value, tags=collect_tags(entries))


@app.get("/api/{category}", response_model=list[ListingEntryResponse])
def list_category(category: str, tag: str | None = None) -> list[ListingEntryResponse]:
    """List a category sorted by order. ``tag`` filters the wiki listing only."""
    resolved = resolve_category(category)
    entries = get_store().list_entries(resolved)
    if resolved is Category.WIKI:
        entries = filter_by_tag(entries, tag)
    return [ListingEntryResponse(**entry.as_dict()) for entry in entries]


@app.get("/api/{category}/{slug}", response_model=ArticleResponse)
def get_article(category: str, slug: str) -> ArticleResponse:
    """Render one article, or 404 when it does not exist."""
    resolved = resolve_category(category)
    article = get_store().get_article(resolved, slug)
    if article is None:
        raise HTTPException(status_code=404, detail="Not found")
    return ArticleResponse(**article.as_dict())


@app.get("/{full_path:path}")
def serve_public(full_path: str):
    """Serve generated assets such as search.json from the public directory."""
    if full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")

    public_dir = get_config().public_dir.resolve()
    file_path = (public_dir / full_path).resolve()
    if file_path.is_relative_to(public_dir) and file_path.is_file():
        return FileResponse(file_path)

    raise HTTPException(status_code=404, detail="Not found")
