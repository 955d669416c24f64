"""Shared fixtures: in-memory record and object stores."""

import itertools
from typing import Any, Optional, Sequence

import pytest

from catalog_admin.errors import NotFound, UploadFailure
from catalog_admin.repositories import CARRIER, CATEGORY, ProductRepository, ResourceRepository
from catalog_admin.stores.interfaces import IObjectStore, IRecordStore, Join

PUBLIC_BASE = "https://project.test/storage/v1/object/public/product"


class FakeRecordStore(IRecordStore):
    """Dict-backed record store that remembers every write payload."""

    def __init__(self):
        self.tables: dict[str, dict[Any, dict]] = {}
        self.writes: list[tuple[str, str, Any, dict]] = []
        self.fail_with: Optional[Exception] = None
        self._ids = itertools.count(1)

    def seed(self, table: str, **row) -> dict:
        row.setdefault("id", next(self._ids))
        self.tables.setdefault(table, {})[row["id"]] = dict(row)
        return row

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _rows(self, table: str) -> dict:
        return self.tables.setdefault(table, {})

    def _joined(self, row: dict, join: Optional[Join]) -> dict:
        data = dict(row)
        if join is not None:
            related = self._rows(join.table).get(row.get(join.foreign_key))
            data[join.alias] = (
                {col: related[col] for col in join.columns} if related else None
            )
        return data

    async def select_page(self, table, *, order_by, start, end, join=None):
        self._maybe_fail()
        rows = sorted(self._rows(table).values(), key=lambda r: (r[order_by], r["id"]))
        window = rows[start:end + 1]
        return [self._joined(r, join) for r in window], len(rows)

    async def select_all(self, table, *, order_by, columns: Optional[Sequence[str]] = None):
        self._maybe_fail()
        rows = sorted(self._rows(table).values(), key=lambda r: (r[order_by], r["id"]))
        if columns:
            return [{c: r[c] for c in columns} for r in rows]
        return [dict(r) for r in rows]

    async def select_one(self, table, record_id, *, join=None):
        self._maybe_fail()
        row = self._rows(table).get(record_id)
        if row is None:
            raise NotFound(f"No row in {table}", record_id=record_id)
        return self._joined(row, join)

    async def insert(self, table, values):
        self._maybe_fail()
        self.writes.append(("insert", table, None, dict(values)))
        return dict(self.seed(table, **values))

    async def update(self, table, record_id, values):
        self._maybe_fail()
        self.writes.append(("update", table, record_id, dict(values)))
        row = self._rows(table).get(record_id)
        if row is None:
            raise NotFound(f"No row in {table}", record_id=record_id)
        row.update(values)
        return dict(row)

    async def delete(self, table, record_id):
        self._maybe_fail()
        self.writes.append(("delete", table, record_id, {}))
        if self._rows(table).pop(record_id, None) is None:
            raise NotFound(f"No row in {table}", record_id=record_id)

    @property
    def last_write(self) -> dict:
        return self.writes[-1][3]


class FakeObjectStore(IObjectStore):
    """In-memory bucket with deterministic public URLs."""

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.fail = False

    async def upload(self, key, data, content_type=None):
        if self.fail:
            raise UploadFailure("bucket unavailable")
        self.objects[key] = data
        return key

    def public_url(self, key):
        return f"{PUBLIC_BASE}/{key}"


@pytest.fixture
def records() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def objects() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def categories(records) -> ResourceRepository:
    return ResourceRepository(CATEGORY, records, page_size=8)


@pytest.fixture
def carriers(records) -> ResourceRepository:
    return ResourceRepository(CARRIER, records, page_size=8)


@pytest.fixture
def products(records, objects) -> ProductRepository:
    return ProductRepository(records, objects, page_size=8)


@pytest.fixture
def public_base() -> str:
    return PUBLIC_BASE
