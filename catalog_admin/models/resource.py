"""
Category and carrier input - name-only resources
"""

from pydantic import BaseModel, ConfigDict, Field


class NamedResourceInput(BaseModel):
    """Fields accepted when creating or renaming a name-only resource."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Display name")


class CategoryInput(NamedResourceInput):
    """Category create/update payload."""


class CarrierInput(NamedResourceInput):
    """Carrier create/update payload."""
