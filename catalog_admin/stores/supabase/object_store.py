"""Hosted object store backed by Supabase Storage."""

from typing import Optional
from urllib.parse import quote

import httpx
from storage3.utils import StorageException
from supabase import AsyncClient

from ...config import logger as log
from ...errors import UploadFailure
from ..interfaces.object_store import IObjectStore


class SupabaseObjectStore(IObjectStore):
    """Uploads into one public bucket.

    Public URLs are derived locally from the project URL, so resolving an
    image never needs a network call.
    """

    def __init__(self, client: AsyncClient, project_url: str, bucket: str):
        self._client = client
        self._project_url = project_url.rstrip("/")
        self.bucket = bucket

    async def upload(
        self, key: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        options = {"content-type": content_type} if content_type else None
        try:
            response = await self._client.storage.from_(self.bucket).upload(
                path=key, file=data, file_options=options
            )
        except StorageException as e:
            raise UploadFailure(str(e), code="storage") from e
        except httpx.HTTPError as e:
            raise UploadFailure(str(e) or type(e).__name__, code="storage.transport") from e

        # Older clients return the raw HTTP response instead of the stored path.
        stored = getattr(response, "path", None) or key
        log.debug("store.supabase", "uploaded", bucket=self.bucket, key=stored)
        return stored

    def public_url(self, key: str) -> str:
        return (
            f"{self._project_url}/storage/v1/object/public/"
            f"{self.bucket}/{quote(key, safe='/')}"
        )
