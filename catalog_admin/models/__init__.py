"""
Input models for catalog writes
"""
from .resource import CarrierInput, CategoryInput
from .product import ImageFile, ProductCreate, ProductUpdate

__all__ = [
    "CategoryInput",
    "CarrierInput",
    "ImageFile",
    "ProductCreate",
    "ProductUpdate",
]
