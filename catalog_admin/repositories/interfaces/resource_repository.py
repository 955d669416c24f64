"""Interface for paginated resource repositories."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel

from ...domain.page import Page

T = TypeVar("T")

Fields = Union[BaseModel, dict]


class IResourceRepository(ABC, Generic[T]):
    """Contract for CRUD and page listing of one resource kind."""

    @abstractmethod
    async def list_page(self, page: int = 1, page_size: Optional[int] = None) -> Page[T]:
        """Gets one page of records ordered by the resource's sort key."""
        pass

    @abstractmethod
    async def get_by_id(self, record_id: Any) -> T:
        """Gets a record by ID, raising NotFound if absent."""
        pass

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Gets every record, for selection lists."""
        pass

    @abstractmethod
    async def create(self, fields: Fields) -> T:
        """Creates a record."""
        pass

    @abstractmethod
    async def update(self, record_id: Any, fields: Fields) -> T:
        """Updates the given fields of a record."""
        pass

    @abstractmethod
    async def delete(self, record_id: Any) -> bool:
        """Deletes a record. Referencing rows are left to the store."""
        pass
