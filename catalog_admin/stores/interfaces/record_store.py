"""Interface for the record store holding catalog rows."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class Join:
    """A left join to a related table.

    The related row's `columns` come back nested under `alias`, or the
    alias maps to None when no related row exists.
    """

    alias: str
    foreign_key: str
    table: str
    columns: tuple[str, ...] = ("name",)


class IRecordStore(ABC):
    """Contract for table-oriented record access.

    Every method raises `NotFound`, `ValidationRejected` or
    `TransportFailure` from `catalog_admin.errors`; nothing is retried.
    """

    @abstractmethod
    async def select_page(
        self,
        table: str,
        *,
        order_by: str,
        start: int,
        end: int,
        join: Optional[Join] = None,
    ) -> tuple[list[dict], int]:
        """Returns rows `start..end` (inclusive, zero-based) and the exact total."""
        pass

    @abstractmethod
    async def select_all(
        self,
        table: str,
        *,
        order_by: str,
        columns: Optional[Sequence[str]] = None,
    ) -> list[dict]:
        """Returns every row ordered ascending by `order_by`."""
        pass

    @abstractmethod
    async def select_one(
        self, table: str, record_id: Any, *, join: Optional[Join] = None
    ) -> dict:
        """Returns the row with `record_id`, raising NotFound if absent."""
        pass

    @abstractmethod
    async def insert(self, table: str, values: dict) -> dict:
        """Inserts a row and returns it as stored."""
        pass

    @abstractmethod
    async def update(self, table: str, record_id: Any, values: dict) -> dict:
        """Updates the given columns and returns the row, raising NotFound if absent."""
        pass

    @abstractmethod
    async def delete(self, table: str, record_id: Any) -> None:
        """Deletes the row, raising NotFound if absent."""
        pass
