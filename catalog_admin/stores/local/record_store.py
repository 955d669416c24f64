"""SQLite implementation of the record store."""

import asyncio
import sqlite3
from typing import Any, Optional, Sequence

from ...config import logger as log
from ...errors import NotFound, TransportFailure, ValidationRejected
from ..interfaces.record_store import IRecordStore, Join
from .connection import SQLiteConnection

_JOIN_MARKER = "__present"


class SQLiteRecordStore(IRecordStore):
    """Local record store.

    Blocking sqlite3 calls run in a worker thread, one connection per call.
    Table and column names are checked against the schema before they are
    interpolated into SQL.
    """

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    async def select_page(
        self,
        table: str,
        *,
        order_by: str,
        start: int,
        end: int,
        join: Optional[Join] = None,
    ) -> tuple[list[dict], int]:
        return await self._run(self._select_page, table, order_by, start, end, join)

    async def select_all(
        self,
        table: str,
        *,
        order_by: str,
        columns: Optional[Sequence[str]] = None,
    ) -> list[dict]:
        return await self._run(self._select_all, table, order_by, columns)

    async def select_one(
        self, table: str, record_id: Any, *, join: Optional[Join] = None
    ) -> dict:
        return await self._run(self._select_one, table, record_id, join)

    async def insert(self, table: str, values: dict) -> dict:
        return await self._run(self._insert, table, values)

    async def update(self, table: str, record_id: Any, values: dict) -> dict:
        return await self._run(self._update, table, record_id, values)

    async def delete(self, table: str, record_id: Any) -> None:
        await self._run(self._delete, table, record_id)

    async def _run(self, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except sqlite3.IntegrityError as e:
            raise ValidationRejected(str(e), code="sqlite.integrity") from e
        except sqlite3.Error as e:
            raise TransportFailure(str(e), code="sqlite.error") from e

    # -- blocking helpers -------------------------------------------------

    def _columns(self, conn: sqlite3.Connection, table: str) -> set[str]:
        rows = conn.execute(
            "SELECT name FROM pragma_table_info(?)", (table,)
        ).fetchall()
        if not rows:
            raise TransportFailure(f"Unknown table: {table}", code="sqlite.table")
        return {row["name"] for row in rows}

    def _check_columns(self, conn: sqlite3.Connection, table: str, names) -> None:
        unknown = set(names) - self._columns(conn, table)
        if unknown:
            raise ValidationRejected(
                f"Unknown column(s) for {table}: {', '.join(sorted(unknown))}",
                code="sqlite.column",
            )

    def _select_clause(self, conn: sqlite3.Connection, table: str, join: Optional[Join]):
        if join is None:
            return f"SELECT t.* FROM {table} t"
        self._check_columns(conn, table, [join.foreign_key])
        self._check_columns(conn, join.table, ("id",) + tuple(join.columns))
        nested = ", ".join(
            f'j.{col} AS "{join.alias}.{col}"' for col in join.columns
        )
        return (
            f'SELECT t.*, j.id AS "{join.alias}.{_JOIN_MARKER}", {nested} '
            f"FROM {table} t LEFT JOIN {join.table} j ON t.{join.foreign_key} = j.id"
        )

    @staticmethod
    def _nest(row: sqlite3.Row, join: Optional[Join]) -> dict:
        data = dict(row)
        if join is None:
            return data
        prefix = f"{join.alias}."
        related = {
            key[len(prefix):]: data.pop(key)
            for key in list(data)
            if key.startswith(prefix)
        }
        present = related.pop(_JOIN_MARKER, None) is not None
        data[join.alias] = related if present else None
        return data

    def _select_page(self, table, order_by, start, end, join):
        limit = max(end - start + 1, 0)
        with self._conn.get_connection() as conn:
            self._check_columns(conn, table, [order_by])
            total = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
            cursor = conn.execute(
                f"{self._select_clause(conn, table, join)} "
                f"ORDER BY t.{order_by} ASC, t.id ASC LIMIT ? OFFSET ?",
                (limit, start),
            )
            rows = [self._nest(row, join) for row in cursor.fetchall()]
        log.debug("store.sqlite", "select_page", table=table, start=start, end=end, count=len(rows), total=total)
        return rows, total

    def _select_all(self, table, order_by, columns):
        with self._conn.get_connection() as conn:
            self._check_columns(conn, table, [order_by, *(columns or ())])
            selected = ", ".join(columns) if columns else "*"
            cursor = conn.execute(
                f"SELECT {selected} FROM {table} ORDER BY {order_by} ASC, id ASC"
            )
            return [dict(row) for row in cursor.fetchall()]

    def _select_one(self, table, record_id, join):
        with self._conn.get_connection() as conn:
            cursor = conn.execute(
                f"{self._select_clause(conn, table, join)} WHERE t.id = ?",
                (record_id,),
            )
            row = cursor.fetchone()
            if row is None:
                raise NotFound(f"No row in {table}", record_id=record_id)
            return self._nest(row, join)

    def _insert(self, table, values):
        with self._conn.get_connection() as conn:
            self._check_columns(conn, table, values)
            names = list(values)
            placeholders = ", ".join("?" for _ in names)
            cursor = conn.execute(
                f"INSERT INTO {table} ({', '.join(names)}) VALUES ({placeholders})",
                [values[name] for name in names],
            )
            row = conn.execute(
                f"SELECT * FROM {table} WHERE id = ?", (cursor.lastrowid,)
            ).fetchone()
            return dict(row)

    def _update(self, table, record_id, values):
        with self._conn.get_connection() as conn:
            self._check_columns(conn, table, values)
            if values:
                assignments = ", ".join(f"{name} = ?" for name in values)
                conn.execute(
                    f"UPDATE {table} SET {assignments} WHERE id = ?",
                    [*values.values(), record_id],
                )
            row = conn.execute(
                f"SELECT * FROM {table} WHERE id = ?", (record_id,)
            ).fetchone()
            if row is None:
                raise NotFound(f"No row in {table}", record_id=record_id)
            return dict(row)

    def _delete(self, table, record_id):
        with self._conn.get_connection() as conn:
            cursor = conn.execute(f"DELETE FROM {table} WHERE id = ?", (record_id,))
            if cursor.rowcount == 0:
                raise NotFound(f"No row in {table}", record_id=record_id)
