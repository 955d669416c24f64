"""Carrier entity - a supplier or shipping partner."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class Carrier:
    id: Any
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Carrier":
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
        }
