"""Names and uploads product images."""

import uuid

from ..config import logger as log
from ..models.product import ImageFile
from ..stores.interfaces.object_store import IObjectStore


def extension_of(filename: str) -> str:
    """Returns what follows the last dot, or "" when there is none."""
    _, dot, ext = filename.rpartition(".")
    return ext if dot else ""


def name_for(filename: str) -> str:
    """Builds a fresh storage key that keeps the file's extension.

    The random part is a uuid4, so concurrent uploads from clients that never
    coordinate do not collide.
    """
    token = str(uuid.uuid4())
    ext = extension_of(filename)
    return f"{token}.{ext}" if ext else token


class ImageUploader:
    """Stores image files under generated keys."""

    def __init__(self, object_store: IObjectStore):
        self._objects = object_store

    async def upload(self, file: ImageFile) -> str:
        """Uploads the file and returns the key the store reports."""
        key = name_for(file.filename)
        log.debug(
            "images.upload",
            "uploading",
            filename=file.filename,
            key=key,
            size=len(file.content),
        )
        stored = await self._objects.upload(key, file.content, file.content_type)
        log.info("images.upload", "stored", key=stored or key)
        return stored or key
