"""Turns stored image references into URLs a browser can fetch."""

import re
from typing import Optional

from ..stores.interfaces.object_store import IObjectStore

_EXTERNAL_URL = re.compile(r"^https?://")


def is_external(raw: str) -> bool:
    """True when the reference is an absolute http(s) URL.

    The stored column carries no tag, so a key that happens to start with
    "http://" is classified as external.
    """
    return bool(_EXTERNAL_URL.match(raw))


class ImageResolver:
    """Resolves image references against the products bucket.

    Resolution is idempotent: public URLs produced for stored keys are
    themselves external URLs and pass through unchanged on a second call.
    """

    def __init__(self, object_store: IObjectStore):
        self._objects = object_store

    def resolve(self, raw: Optional[str]) -> Optional[str]:
        if not raw:
            return None
        if is_external(raw):
            return raw
        return self._objects.public_url(raw)
