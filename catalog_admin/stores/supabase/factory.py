"""Factory for creating a Container on the hosted Supabase project."""

from typing import Optional

from supabase import AsyncClient, acreate_client

from ...config import logger as log
from ...config.env import get_product_bucket, get_supabase_key, get_supabase_url
from ...container import Container
from ...repositories.product_repository import ProductRepository
from ...repositories.resource_repository import CARRIER, CATEGORY, ResourceRepository
from .object_store import SupabaseObjectStore
from .record_store import SupabaseRecordStore


def build_container(
    client: AsyncClient,
    project_url: str,
    bucket: Optional[str] = None,
    page_size: Optional[int] = None,
) -> Container:
    """Wires repositories around an already connected client."""
    records = SupabaseRecordStore(client)
    objects = SupabaseObjectStore(client, project_url, bucket or get_product_bucket())

    return Container(
        categories=ResourceRepository(CATEGORY, records, page_size),
        carriers=ResourceRepository(CARRIER, records, page_size),
        products=ProductRepository(records, objects, page_size),
    )


async def create_supabase_container(
    url: Optional[str] = None,
    key: Optional[str] = None,
    bucket: Optional[str] = None,
    page_size: Optional[int] = None,
) -> Container:
    """Connects to the hosted project and returns a Container.

    Args:
        url: Project URL. Falls back to SUPABASE_URL.
        key: API key. Falls back to SUPABASE_KEY.
        bucket: Image bucket. Falls back to CATALOG_PRODUCT_BUCKET.
        page_size: Default listing page size.

    Raises:
        RuntimeError: If url or key is missing from both arguments and environment.
    """
    url = (url or get_supabase_url()).rstrip("/")
    client = await acreate_client(url, key or get_supabase_key())
    log.info("store.supabase", "client created", url=url)
    return build_container(client, url, bucket, page_size)
