"""Category entity - groups products for display and filtering."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class Category:
    """A named product category."""

    id: Any
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Creates a Category from a record-store row."""
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
        }
