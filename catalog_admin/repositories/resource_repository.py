"""Generic paginated repository over one record-store table."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import logger as log
from ..config.env import get_page_size
from ..constants.resources import Tables
from ..domain.carrier import Carrier
from ..domain.category import Category
from ..domain.page import Page
from ..domain.product import Product
from ..errors import CatalogError, ValidationRejected
from ..models.product import ProductCreate, ProductUpdate
from ..models.resource import CarrierInput, CategoryInput
from ..stores.interfaces.record_store import IRecordStore, Join
from .interfaces.resource_repository import Fields, IResourceRepository

T = TypeVar("T")


@dataclass(frozen=True)
class ResourceKind(Generic[T]):
    """Everything the generic repository needs to know about a resource."""

    name: str
    table: str
    order_by: str
    from_row: Callable[[dict], T]
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    join: Optional[Join] = None
    all_columns: Optional[tuple[str, ...]] = None


CATEGORY = ResourceKind(
    name="category",
    table=Tables.CATEGORIES,
    order_by="name",
    from_row=Category.from_dict,
    create_model=CategoryInput,
    update_model=CategoryInput,
    all_columns=("id", "name"),
)

CARRIER = ResourceKind(
    name="carrier",
    table=Tables.CARRIERS,
    order_by="name",
    from_row=Carrier.from_dict,
    create_model=CarrierInput,
    update_model=CarrierInput,
    all_columns=("id", "name"),
)

PRODUCT = ResourceKind(
    name="product",
    table=Tables.PRODUCTS,
    order_by="title",
    from_row=Product.from_dict,
    create_model=ProductCreate,
    update_model=ProductUpdate,
    join=Join(alias="category", foreign_key="category_id", table=Tables.CATEGORIES),
)


def parse_fields(model: type[BaseModel], fields: Fields) -> BaseModel:
    """Validates caller input, turning pydantic errors into ValidationRejected."""
    if isinstance(fields, model):
        return fields
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    try:
        return model.model_validate(fields)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationRejected(problems, code="input") from e


class ResourceRepository(IResourceRepository[T]):
    """CRUD and page listing for one resource kind.

    Holds no state besides its collaborators, so concurrent calls never
    interfere; the store decides the outcome of racing writes.
    """

    def __init__(
        self,
        kind: ResourceKind[T],
        records: IRecordStore,
        page_size: Optional[int] = None,
    ):
        self.kind = kind
        self._records = records
        self._page_size = page_size or get_page_size()
        self._context = f"repo.{kind.name}"

    @contextmanager
    def _operation(self, operation: str, record_id: Any = None):
        """Binds call context to failures, logs them, and re-raises."""
        try:
            yield
        except CatalogError as e:
            e.bind(operation, self.kind.name, record_id)
            log.error(
                self._context,
                f"{operation} failed",
                error=type(e).__name__,
                id=e.record_id,
                code=e.code,
                detail=e.detail,
            )
            raise

    def _to_entity(self, row: dict) -> T:
        return self.kind.from_row(row)

    async def list_page(self, page: int = 1, page_size: Optional[int] = None) -> Page[T]:
        size = self._page_size if page_size is None else page_size
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if size < 1:
            raise ValueError(f"page_size must be > 0, got {size}")

        start = (page - 1) * size
        end = start + size - 1
        log.debug(self._context, "list", page=page, page_size=size)
        with self._operation("list"):
            rows, total = await self._records.select_page(
                self.kind.table,
                order_by=self.kind.order_by,
                start=start,
                end=end,
                join=self.kind.join,
            )

        result = Page(
            items=[self._to_entity(row) for row in rows],
            total=total,
            page=page,
            page_size=size,
        )
        log.debug(
            self._context,
            "list result",
            count=len(result.items),
            total=total,
            total_pages=result.total_pages,
        )
        return result

    async def get_by_id(self, record_id: Any) -> T:
        log.debug(self._context, "get_by_id", id=record_id)
        with self._operation("get_by_id", record_id):
            row = await self._records.select_one(
                self.kind.table, record_id, join=self.kind.join
            )
        return self._to_entity(row)

    async def get_all(self) -> list[T]:
        log.debug(self._context, "get_all")
        with self._operation("get_all"):
            rows = await self._records.select_all(
                self.kind.table,
                order_by=self.kind.order_by,
                columns=self.kind.all_columns,
            )
        return [self._to_entity(row) for row in rows]

    async def create(self, fields: Fields) -> T:
        with self._operation("create"):
            data = parse_fields(self.kind.create_model, fields)
            row = await self._records.insert(self.kind.table, data.model_dump())
        entity = self._to_entity(row)
        log.info(self._context, "created", id=row.get("id"))
        return entity

    async def update(self, record_id: Any, fields: Fields) -> T:
        with self._operation("update", record_id):
            data = parse_fields(self.kind.update_model, fields)
            row = await self._records.update(
                self.kind.table, record_id, data.model_dump(exclude_unset=True)
            )
        log.info(self._context, "updated", id=record_id)
        return self._to_entity(row)

    async def delete(self, record_id: Any) -> bool:
        with self._operation("delete", record_id):
            await self._records.delete(self.kind.table, record_id)
        log.info(self._context, "deleted", id=record_id)
        return True
