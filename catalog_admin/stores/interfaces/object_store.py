"""Interface for the object store holding uploaded images."""

from abc import ABC, abstractmethod
from typing import Optional


class IObjectStore(ABC):
    """Contract for blob storage within one fixed bucket."""

    @abstractmethod
    async def upload(
        self, key: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        """Stores `data` under `key` and returns the key actually stored.

        Raises:
            UploadFailure: If the store does not accept the blob.
        """
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Returns the publicly fetchable URL for `key`. Must not do I/O."""
        pass
