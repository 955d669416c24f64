"""Dependency injection container for repository access."""

from dataclasses import dataclass

from .domain.carrier import Carrier
from .domain.category import Category
from .repositories.interfaces.product_repository import IProductRepository
from .repositories.interfaces.resource_repository import IResourceRepository


@dataclass
class Container:
    """Holds the repository instances an admin page works with.

    Built explicitly by a factory and passed to whoever needs it; there is
    no process-wide instance.
    """

    categories: IResourceRepository[Category]
    carriers: IResourceRepository[Carrier]
    products: IProductRepository
