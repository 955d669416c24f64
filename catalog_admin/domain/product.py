"""Product entity - an item of the catalog."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional


@dataclass
class Product:
    """A catalog product.

    `image_url` holds whatever the caller should show: after passing through
    a repository it is always directly fetchable, never a raw storage key.
    `category_name` is filled only when the row was read with the category
    join, and stays None when the join found nothing.
    """

    id: Any
    title: str
    price: Decimal
    category_id: Any
    description: str = ""
    image_url: Optional[str] = None
    category_name: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Creates a Product from a record-store row."""
        price = data["price"]
        if not isinstance(price, Decimal):
            price = Decimal(str(price))

        category = data.get("category") or {}

        return cls(
            id=data["id"],
            title=data["title"],
            price=price,
            category_id=data.get("category_id"),
            description=data.get("description") or "",
            image_url=data.get("image_url"),
            category_name=category.get("name"),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "category_id": self.category_id,
            "image_url": self.image_url,
            "category_name": self.category_name,
            "created_at": self.created_at,
        }

    def with_image(self, resolve: Callable[[Optional[str]], Optional[str]]) -> "Product":
        """Returns a copy whose image reference went through `resolve`."""
        return replace(self, image_url=resolve(self.image_url))

    @property
    def price_formatted(self) -> str:
        """Price formatted with currency symbol."""
        return f"R$ {self.price:.2f}"
