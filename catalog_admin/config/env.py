"""Environment variables configuration."""

import os
from pathlib import Path
from typing import Optional

from ..constants.resources import DEFAULT_PAGE_SIZE, PRODUCT_BUCKET


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} environment variable is required")
    return value


def get_supabase_url() -> str:
    """Returns the hosted project URL, without trailing slash."""
    return _require("SUPABASE_URL").rstrip("/")


def get_supabase_key() -> str:
    """Returns the API key used by the hosted client."""
    return _require("SUPABASE_KEY")


def get_product_bucket() -> str:
    """Returns the bucket holding uploaded product images."""
    return os.getenv("CATALOG_PRODUCT_BUCKET", PRODUCT_BUCKET)


def get_page_size() -> int:
    """Returns the default page size for listings."""
    raw = os.getenv("CATALOG_PAGE_SIZE")
    if not raw:
        return DEFAULT_PAGE_SIZE
    size = int(raw)
    if size < 1:
        raise RuntimeError("CATALOG_PAGE_SIZE must be a positive integer")
    return size


def get_db_path() -> Optional[Path]:
    """Returns the local SQLite database path, if configured."""
    raw = os.getenv("CATALOG_DB_PATH")
    return Path(raw) if raw else None


def get_media_root() -> Path:
    """Returns the directory backing the local object store."""
    return Path(os.getenv("CATALOG_MEDIA_ROOT", "data/media"))


def get_media_base_url() -> str:
    """Returns the base URL under which local media is served."""
    return os.getenv("CATALOG_MEDIA_BASE_URL", "http://localhost:8000/media").rstrip("/")
