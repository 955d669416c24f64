from .category import Category
from .carrier import Carrier
from .product import Product
from .page import Page
from .image import Clear, ImageChange, Replace, Unset, Upload

__all__ = [
    "Category",
    "Carrier",
    "Product",
    "Page",
    "ImageChange",
    "Unset",
    "Clear",
    "Replace",
    "Upload",
]
