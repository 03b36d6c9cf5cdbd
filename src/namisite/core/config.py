"""Site configuration loaded from YAML with environment overrides."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Default paths relative to project root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "site.yaml"
DEFAULT_CONTENT_DIR = PROJECT_ROOT / "_content"
DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public"

DEFAULT_RESULT_LIMIT = 5
SEARCH_INDEX_FILENAME = "search.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SiteConfig:
    """Resolved site settings."""

    content_dir: Path = DEFAULT_CONTENT_DIR
    public_dir: Path = DEFAULT_PUBLIC_DIR
    allow_raw_html: bool = True
    result_limit: int = DEFAULT_RESULT_LIMIT
    site_name: str = "Nami Server"

    @property
    def search_index_path(self) -> Path:
        return self.public_dir / SEARCH_INDEX_FILENAME


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _config_bool(value, name: str) -> bool:
    """YAML booleans pass through; quoted strings are parsed like env values."""
    if isinstance(value, str):
        return _parse_bool(value, name)
    return bool(value)


def _resolve(path_value: str | os.PathLike, base_dir: Path) -> Path:
    path = Path(path_value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def load_config(config_path: Path | None = None) -> SiteConfig:
    """Load configuration from YAML file, then apply environment overrides.

    Args:
        config_path: Path to config file, defaults to config/site.yaml.
            An explicit path that does not exist is an error; a missing
            default file falls back to built-in defaults.

    Returns:
        Resolved SiteConfig
    """
    load_dotenv()

    path = config_path or DEFAULT_CONFIG_PATH
    raw: dict = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")

    base_dir = path.parent
    render = raw.get("render") or {}
    search = raw.get("search") or {}
    site = raw.get("site") or {}

    config = SiteConfig(
        content_dir=_resolve(raw["content_dir"], base_dir) if raw.get("content_dir") else DEFAULT_CONTENT_DIR,
        public_dir=_resolve(raw["public_dir"], base_dir) if raw.get("public_dir") else DEFAULT_PUBLIC_DIR,
        allow_raw_html=_config_bool(render.get("allow_raw_html", True), "render.allow_raw_html"),
        result_limit=int(search.get("result_limit", DEFAULT_RESULT_LIMIT)),
        site_name=str(site.get("name", "Nami Server")),
    )

    # Environment wins over the file
    if os.environ.get("NAMISITE_CONTENT_DIR"):
        config.content_dir = Path(os.environ["NAMISITE_CONTENT_DIR"]).expanduser()
    if os.environ.get("NAMISITE_PUBLIC_DIR"):
        config.public_dir = Path(os.environ["NAMISITE_PUBLIC_DIR"]).expanduser()
    if os.environ.get("NAMISITE_ALLOW_RAW_HTML"):
        config.allow_raw_html = _parse_bool(
            os.environ["NAMISITE_ALLOW_RAW_HTML"], "NAMISITE_ALLOW_RAW_HTML"
        )

    if config.result_limit < 1:
        raise ValueError(f"search.result_limit must be positive, got {config.result_limit}")

    return config
