"""Filesystem implementation of the object store."""

import asyncio
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

from ...config import logger as log
from ...errors import UploadFailure
from ..interfaces.object_store import IObjectStore


class LocalObjectStore(IObjectStore):
    """Stores blobs under `root/bucket/key`, served from `base_url/bucket/key`."""

    def __init__(self, root: Union[str, Path], bucket: str, base_url: str):
        self.bucket = bucket
        self._dir = Path(root) / bucket
        self._base_url = base_url.rstrip("/")

    def _path_for(self, key: str) -> Path:
        base = self._dir.resolve()
        path = (self._dir / key).resolve()
        if path == base or base not in path.parents:
            raise UploadFailure(f"Key escapes the bucket: {key}", code="local.key")
        return path

    async def upload(
        self, key: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except FileExistsError as e:
            raise UploadFailure(f"Object already exists: {key}", code="local.duplicate") from e
        except OSError as e:
            raise UploadFailure(str(e), code="local.io") from e
        log.debug("store.local", "uploaded", bucket=self.bucket, key=key, content_type=content_type)
        return key

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "xb") as fh:
            fh.write(data)

    def public_url(self, key: str) -> str:
        return f"{self._base_url}/{self.bucket}/{quote(key, safe='/')}"
