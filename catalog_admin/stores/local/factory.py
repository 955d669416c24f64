"""Factory for creating a Container on local SQLite and filesystem stores."""

from pathlib import Path
from typing import Optional, Union

from ...config.env import get_db_path, get_media_base_url, get_media_root, get_product_bucket
from ...container import Container
from ...repositories.product_repository import ProductRepository
from ...repositories.resource_repository import CARRIER, CATEGORY, ResourceRepository
from .connection import SQLiteConnection
from .object_store import LocalObjectStore
from .record_store import SQLiteRecordStore


def create_local_container(
    db_path: Optional[Union[str, Path]] = None,
    media_root: Optional[Union[str, Path]] = None,
    media_base_url: Optional[str] = None,
    page_size: Optional[int] = None,
) -> Container:
    """Creates a Container backed by a SQLite file and a media directory.

    Args:
        db_path: Database file. Falls back to CATALOG_DB_PATH, then the default.
        media_root: Directory for uploads. Falls back to CATALOG_MEDIA_ROOT.
        media_base_url: URL prefix serving `media_root`.
        page_size: Default listing page size.

    Returns:
        Container: Configured with local repositories.
    """
    records = SQLiteRecordStore(SQLiteConnection(db_path or get_db_path()))
    objects = LocalObjectStore(
        media_root or get_media_root(),
        get_product_bucket(),
        media_base_url or get_media_base_url(),
    )

    return Container(
        categories=ResourceRepository(CATEGORY, records, page_size),
        carriers=ResourceRepository(CARRIER, records, page_size),
        products=ProductRepository(records, objects, page_size),
    )
