"""Integration tests for the SQLite record store and filesystem object store."""

from decimal import Decimal

import pytest

from catalog_admin.errors import NotFound, UploadFailure, ValidationRejected
from catalog_admin.models import ImageFile
from catalog_admin.stores.local import LocalObjectStore, SQLiteConnection, SQLiteRecordStore
from catalog_admin.stores.local.factory import create_local_container
from catalog_admin.stores.interfaces import Join


@pytest.fixture
def store(tmp_path) -> SQLiteRecordStore:
    return SQLiteRecordStore(SQLiteConnection(tmp_path / "catalog.db"))


@pytest.fixture
def container(tmp_path):
    return create_local_container(
        db_path=tmp_path / "catalog.db",
        media_root=tmp_path / "media",
        media_base_url="http://localhost:9000/media/",
        page_size=8,
    )


class TestSQLiteRecordStore:
    @pytest.mark.asyncio
    async def test_page_window_and_count(self, store):
        for name in ["c", "a", "e", "b", "d"]:
            await store.insert("categories", {"name": name})

        rows, total = await store.select_page("categories", order_by="name", start=2, end=3)

        assert total == 5
        assert [r["name"] for r in rows] == ["c", "d"]

    @pytest.mark.asyncio
    async def test_left_join_nests_related_row(self, store):
        category = await store.insert("categories", {"name": "Livros"})
        await store.insert("products", {"title": "A", "price": Decimal("1.50"), "category_id": category["id"]})
        await store.insert("products", {"title": "B", "price": Decimal("2"), "category_id": None})
        join = Join(alias="category", foreign_key="category_id", table="categories")

        rows, total = await store.select_page("products", order_by="title", start=0, end=9, join=join)

        assert total == 2
        assert rows[0]["category"] == {"name": "Livros"}
        assert rows[1]["category"] is None
        assert rows[0]["price"] == Decimal("1.5")

    @pytest.mark.asyncio
    async def test_select_one_missing(self, store):
        with pytest.raises(NotFound):
            await store.select_one("categories", 1)

    @pytest.mark.asyncio
    async def test_update_only_given_columns(self, store):
        category = await store.insert("categories", {"name": "Livros"})
        product = await store.insert(
            "products",
            {"title": "A", "price": Decimal("1"), "category_id": category["id"], "image_url": "k.png"},
        )

        updated = await store.update("products", product["id"], {"title": "B"})

        assert updated["title"] == "B"
        assert updated["image_url"] == "k.png"

    @pytest.mark.asyncio
    async def test_update_missing(self, store):
        with pytest.raises(NotFound):
            await store.update("categories", 42, {"name": "x"})

    @pytest.mark.asyncio
    async def test_delete_missing(self, store):
        with pytest.raises(NotFound):
            await store.delete("carriers", 42)

    @pytest.mark.asyncio
    async def test_foreign_key_violation_is_rejected(self, store):
        with pytest.raises(ValidationRejected):
            await store.insert("products", {"title": "A", "price": Decimal("1"), "category_id": 999})

    @pytest.mark.asyncio
    async def test_deleting_referenced_category_is_rejected(self, store):
        category = await store.insert("categories", {"name": "Livros"})
        await store.insert("products", {"title": "A", "price": Decimal("1"), "category_id": category["id"]})

        with pytest.raises(ValidationRejected):
            await store.delete("categories", category["id"])

    @pytest.mark.asyncio
    async def test_unknown_column_is_rejected(self, store):
        with pytest.raises(ValidationRejected):
            await store.insert("categories", {"name": "x", "bogus; DROP TABLE categories": 1})

    @pytest.mark.asyncio
    async def test_select_all_columns(self, store):
        await store.insert("carriers", {"name": "Loggi"})
        await store.insert("carriers", {"name": "Correios"})

        rows = await store.select_all("carriers", order_by="name", columns=("id", "name"))

        assert [r["name"] for r in rows] == ["Correios", "Loggi"]
        assert set(rows[0]) == {"id", "name"}


class TestLocalObjectStore:
    @pytest.mark.asyncio
    async def test_upload_and_public_url(self, tmp_path):
        objects = LocalObjectStore(tmp_path, "product", "http://localhost:9000/media/")

        key = await objects.upload("abc.png", b"data")

        assert (tmp_path / "product" / "abc.png").read_bytes() == b"data"
        assert objects.public_url(key) == "http://localhost:9000/media/product/abc.png"

    @pytest.mark.asyncio
    async def test_refuses_overwrite(self, tmp_path):
        objects = LocalObjectStore(tmp_path, "product", "http://x")
        await objects.upload("abc.png", b"1")

        with pytest.raises(UploadFailure):
            await objects.upload("abc.png", b"2")

    @pytest.mark.asyncio
    async def test_refuses_path_escape(self, tmp_path):
        objects = LocalObjectStore(tmp_path / "media", "product", "http://x")

        with pytest.raises(UploadFailure):
            await objects.upload("../../evil.png", b"1")


class TestLocalContainer:
    @pytest.mark.asyncio
    async def test_product_lifecycle(self, container, tmp_path):
        category = await container.categories.create({"name": "Calçados"})
        product = await container.products.create(
            {
                "title": "Tênis",
                "price": "199.90",
                "category_id": category.id,
                "image_file": ImageFile(filename="shoe.jpg", content=b"jpg"),
            }
        )

        assert product.image_url.startswith("http://localhost:9000/media/product/")
        assert product.image_url.endswith(".jpg")
        assert len(list((tmp_path / "media" / "product").iterdir())) == 1

        renamed = await container.products.update(product.id, {"title": "Tênis Pro"})
        assert renamed.image_url == product.image_url

        fetched = await container.products.get_by_id(product.id)
        assert fetched.category_name == "Calçados"
        assert fetched.price == Decimal("199.9")

        cleared = await container.products.update(product.id, {"image_url": None})
        assert cleared.image_url is None

        assert await container.products.delete(product.id) is True
        with pytest.raises(NotFound):
            await container.products.delete(product.id)

    @pytest.mark.asyncio
    async def test_category_pages(self, container):
        for i in range(10):
            await container.categories.create({"name": f"Categoria {i:02d}"})

        page = await container.categories.list_page(2, 8)

        assert page.total == 10
        assert page.total_pages == 2
        assert [c.name for c in page.items] == ["Categoria 08", "Categoria 09"]
