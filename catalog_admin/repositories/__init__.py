from .product_repository import ProductRepository
from .resource_repository import CARRIER, CATEGORY, PRODUCT, ResourceKind, ResourceRepository
from .update_composer import ProductUpdateComposer, image_change_from

__all__ = [
    "ResourceKind",
    "ResourceRepository",
    "ProductRepository",
    "ProductUpdateComposer",
    "image_change_from",
    "CATEGORY",
    "CARRIER",
    "PRODUCT",
]
