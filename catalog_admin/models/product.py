"""
Product input - create and partial update payloads
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _required(value: Any) -> Any:
    if value is None or value == "":
        raise ValueError("is required")
    return value


class ImageFile(BaseModel):
    """An uploaded image as received from the form."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(..., min_length=1, description="Original file name")
    content: bytes = Field(..., description="Raw file bytes")
    content_type: Optional[str] = Field(None, description="MIME type reported by the client")


class ProductCreate(BaseModel):
    """
    Payload for a new product.
    Strings are stripped, so a blank title is rejected.
    When both an image file and an image URL are supplied, the file wins.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., min_length=1, description="Product title")
    description: str = Field(default="", description="Free text description")
    price: Decimal = Field(..., gt=0, description="Unit price, strictly positive")
    category_id: Any = Field(..., description="ID of an existing category")

    image_file: Optional[ImageFile] = Field(None, description="File to upload")
    image_url: Optional[str] = Field(None, description="External URL or stored key")

    @field_validator("category_id")
    @classmethod
    def category_required(cls, value: Any) -> Any:
        return _required(value)

    def record_fields(self) -> dict:
        """Fields written to the record store, without image handling."""
        return self.model_dump(exclude={"image_file", "image_url"})


class ProductUpdate(BaseModel):
    """
    Partial product update.
    Only the fields the caller actually passed are sent to the store;
    `model_fields_set` tells an omitted `image_url` from an explicit None.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, gt=0)
    category_id: Any = None

    image_file: Optional[ImageFile] = None
    image_url: Optional[str] = None

    @field_validator("title", "price", "category_id")
    @classmethod
    def not_cleared_when_given(cls, value: Any) -> Any:
        return _required(value)

    def record_fields(self) -> dict:
        """Explicitly passed fields, without image handling."""
        return self.model_dump(
            exclude_unset=True, exclude={"image_file", "image_url"}
        )
