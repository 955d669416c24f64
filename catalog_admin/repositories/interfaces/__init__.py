from .product_repository import IProductRepository
from .resource_repository import IResourceRepository

__all__ = ["IProductRepository", "IResourceRepository"]
