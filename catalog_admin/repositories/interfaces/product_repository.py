"""Interface for product repository."""

from abc import abstractmethod

from ...domain.product import Product
from ...models.product import ImageFile
from .resource_repository import IResourceRepository


class IProductRepository(IResourceRepository[Product]):
    """Contract for product data access, including image uploads."""

    @abstractmethod
    async def upload_image(self, file: ImageFile) -> str:
        """Uploads an image and returns its storage key."""
        pass
