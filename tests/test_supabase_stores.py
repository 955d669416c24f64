"""Tests for the hosted store adapters against a fake query builder."""

from decimal import Decimal
from types import SimpleNamespace

import httpx
import pytest
from postgrest.exceptions import APIError

from catalog_admin.errors import NotFound, TransportFailure, UploadFailure, ValidationRejected
from catalog_admin.stores.interfaces import Join
from catalog_admin.stores.supabase import SupabaseObjectStore, SupabaseRecordStore
from catalog_admin.stores.supabase.record_store import translate_api_error


class FakeQuery:
    """Records the builder chain and answers `execute` with a canned response."""

    def __init__(self, table, outcome):
        self.table = table
        self.calls = []
        self._outcome = outcome

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    async def execute(self):
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


class FakeClient:
    def __init__(self, outcome):
        self.outcome = outcome
        self.queries = []

    def table(self, name):
        query = FakeQuery(name, self.outcome)
        self.queries.append(query)
        return query


def response(data, count=None):
    return SimpleNamespace(data=data, count=count)


def api_error(code, message="boom", details=None):
    return APIError({"code": code, "message": message, "details": details, "hint": None})


class TestTranslateApiError:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("PGRST116", NotFound),
            ("23503", ValidationRejected),
            ("23505", ValidationRejected),
            ("22P02", ValidationRejected),
            ("PGRST204", ValidationRejected),
            ("42501", TransportFailure),
            ("PGRST301", TransportFailure),
        ],
    )
    def test_codes(self, code, expected):
        error = translate_api_error(api_error(code))

        assert type(error) is expected
        assert error.code == code

    def test_detail_carries_store_message(self):
        error = translate_api_error(api_error("23503", "fk violation", "Key (category_id)=(9)"))
        assert error.detail == "fk violation (Key (category_id)=(9))"


class TestSupabaseRecordStore:
    @pytest.mark.asyncio
    async def test_select_page_builds_counted_ordered_range(self):
        client = FakeClient(response([{"id": 1}], count=10))
        store = SupabaseRecordStore(client)
        join = Join(alias="category", foreign_key="category_id", table="categories")

        rows, total = await store.select_page("products", order_by="title", start=8, end=15, join=join)

        assert rows == [{"id": 1}]
        assert total == 10
        calls = client.queries[0].calls
        assert calls[0][0] == "select"
        assert calls[0][1] == ("*, category:category_id(name)",)
        orders = [call for call in calls if call[0] == "order"]
        assert orders == [
            ("order", ("title",), {"desc": False}),
            ("order", ("id",), {"desc": False}),
        ]
        assert ("range", (8, 15), {}) in calls

    @pytest.mark.asyncio
    async def test_select_one_empty_is_not_found(self):
        store = SupabaseRecordStore(FakeClient(response([])))

        with pytest.raises(NotFound):
            await store.select_one("categories", 7)

    @pytest.mark.asyncio
    async def test_delete_without_returned_rows_is_not_found(self):
        store = SupabaseRecordStore(FakeClient(response([])))

        with pytest.raises(NotFound):
            await store.delete("carriers", 7)

    @pytest.mark.asyncio
    async def test_insert_serializes_decimals(self):
        client = FakeClient(response([{"id": 1, "price": "9.90"}]))
        store = SupabaseRecordStore(client)

        await store.insert("products", {"title": "x", "price": Decimal("9.90")})

        name, args, _ = client.queries[0].calls[0]
        assert name == "insert"
        assert args[0] == {"title": "x", "price": "9.90"}

    @pytest.mark.asyncio
    async def test_api_error_is_translated(self):
        store = SupabaseRecordStore(FakeClient(api_error("23503")))

        with pytest.raises(ValidationRejected):
            await store.update("products", 1, {"category_id": 99})

    @pytest.mark.asyncio
    async def test_select_all_breaks_ties_by_id(self):
        client = FakeClient(response([]))
        store = SupabaseRecordStore(client)

        await store.select_all("carriers", order_by="name", columns=("id", "name"))

        orders = [call for call in client.queries[0].calls if call[0] == "order"]
        assert orders == [
            ("order", ("name",), {"desc": False}),
            ("order", ("id",), {"desc": False}),
        ]

    @pytest.mark.asyncio
    async def test_network_error_is_transport_failure(self):
        store = SupabaseRecordStore(FakeClient(httpx.ConnectError("unreachable")))

        with pytest.raises(TransportFailure):
            await store.select_all("categories", order_by="name")


class FakeBucket:
    def __init__(self, outcome):
        self.outcome = outcome
        self.uploads = []

    async def upload(self, path, file, file_options=None):
        self.uploads.append((path, file, file_options))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def storage_client(bucket):
    return SimpleNamespace(storage=SimpleNamespace(from_=lambda name: bucket))


class TestSupabaseObjectStore:
    def test_public_url(self):
        store = SupabaseObjectStore(None, "https://abc.supabase.co/", "product")

        assert (
            store.public_url("f00.png")
            == "https://abc.supabase.co/storage/v1/object/public/product/f00.png"
        )

    @pytest.mark.asyncio
    async def test_upload_returns_reported_path(self):
        bucket = FakeBucket(SimpleNamespace(path="f00.png"))
        store = SupabaseObjectStore(storage_client(bucket), "https://abc.supabase.co", "product")

        assert await store.upload("f00.png", b"x", "image/png") == "f00.png"
        assert bucket.uploads == [("f00.png", b"x", {"content-type": "image/png"})]

    @pytest.mark.asyncio
    async def test_upload_falls_back_to_requested_key(self):
        bucket = FakeBucket(object())
        store = SupabaseObjectStore(storage_client(bucket), "https://abc.supabase.co", "product")

        assert await store.upload("f00.png", b"x") == "f00.png"

    @pytest.mark.asyncio
    async def test_upload_network_error(self):
        bucket = FakeBucket(httpx.ReadTimeout("slow"))
        store = SupabaseObjectStore(storage_client(bucket), "https://abc.supabase.co", "product")

        with pytest.raises(UploadFailure):
            await store.upload("f00.png", b"x")
