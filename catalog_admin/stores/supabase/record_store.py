"""Hosted record store backed by the Supabase (PostgREST) async client."""

from decimal import Decimal
from typing import Any, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from postgrest.types import CountMethod
from supabase import AsyncClient

from ...config import logger as log
from ...errors import CatalogError, NotFound, TransportFailure, ValidationRejected
from ..interfaces.record_store import IRecordStore, Join

# PostgREST: no rows for a single-object request.
NOT_FOUND_CODES = {"PGRST116"}
# PostgREST: column not found in the schema cache.
REJECTED_CODES = {"PGRST204"}
# Postgres SQLSTATE classes: 22 data exception, 23 integrity constraint violation.
REJECTED_CLASSES = ("22", "23")


def translate_api_error(exc: APIError) -> CatalogError:
    """Maps a PostgREST error onto the catalog failure taxonomy."""
    code = exc.code or ""
    detail = exc.message or str(exc)
    if exc.details:
        detail = f"{detail} ({exc.details})"
    if code in NOT_FOUND_CODES:
        return NotFound(detail, code=code)
    if code in REJECTED_CODES or code.startswith(REJECTED_CLASSES):
        return ValidationRejected(detail, code=code)
    return TransportFailure(detail, code=code or None)


def _jsonable(values: dict) -> dict:
    return {
        key: str(value) if isinstance(value, Decimal) else value
        for key, value in values.items()
    }


def _select_expr(join: Optional[Join]) -> str:
    if join is None:
        return "*"
    return f"*, {join.alias}:{join.foreign_key}({', '.join(join.columns)})"


class SupabaseRecordStore(IRecordStore):
    """Record store speaking to a hosted Postgres through PostgREST.

    Listings order by the resource key, then by id, so equal keys keep a
    fixed position across page windows.
    """

    def __init__(self, client: AsyncClient):
        self._client = client

    async def _execute(self, query, table: str):
        try:
            return await query.execute()
        except APIError as e:
            raise translate_api_error(e) from e
        except httpx.HTTPError as e:
            log.debug("store.supabase", "transport error", table=table, error=e)
            raise TransportFailure(str(e) or type(e).__name__) from e

    async def select_page(
        self,
        table: str,
        *,
        order_by: str,
        start: int,
        end: int,
        join: Optional[Join] = None,
    ) -> tuple[list[dict], int]:
        query = (
            self._client.table(table)
            .select(_select_expr(join), count=CountMethod.exact)
            .order(order_by, desc=False)
            .order("id", desc=False)
            .range(start, end)
        )
        response = await self._execute(query, table)
        rows = response.data or []
        total = response.count if response.count is not None else len(rows)
        log.debug("store.supabase", "select_page", table=table, start=start, end=end, total=total)
        return rows, total

    async def select_all(
        self,
        table: str,
        *,
        order_by: str,
        columns: Optional[Sequence[str]] = None,
    ) -> list[dict]:
        expr = ", ".join(columns) if columns else "*"
        query = (
            self._client.table(table)
            .select(expr)
            .order(order_by, desc=False)
            .order("id", desc=False)
        )
        response = await self._execute(query, table)
        return response.data or []

    async def select_one(
        self, table: str, record_id: Any, *, join: Optional[Join] = None
    ) -> dict:
        query = (
            self._client.table(table)
            .select(_select_expr(join))
            .eq("id", record_id)
            .limit(1)
        )
        response = await self._execute(query, table)
        if not response.data:
            raise NotFound(f"No row in {table}", record_id=record_id)
        return response.data[0]

    async def insert(self, table: str, values: dict) -> dict:
        query = self._client.table(table).insert(_jsonable(values))
        response = await self._execute(query, table)
        if not response.data:
            raise TransportFailure(f"Insert into {table} returned no row")
        return response.data[0]

    async def update(self, table: str, record_id: Any, values: dict) -> dict:
        query = self._client.table(table).update(_jsonable(values)).eq("id", record_id)
        response = await self._execute(query, table)
        if not response.data:
            raise NotFound(f"No row in {table}", record_id=record_id)
        return response.data[0]

    async def delete(self, table: str, record_id: Any) -> None:
        query = self._client.table(table).delete().eq("id", record_id)
        response = await self._execute(query, table)
        if not response.data:
            raise NotFound(f"No row in {table}", record_id=record_id)
