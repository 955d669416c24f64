"""Product repository: resource repository plus image handling."""

from typing import Any, Optional

from ..config import logger as log
from ..constants.resources import IMAGE_FIELD
from ..domain.image import Upload
from ..domain.product import Product
from ..errors import CatalogError, ValidationRejected
from ..images.resolver import ImageResolver
from ..images.uploads import ImageUploader
from ..models.product import ImageFile, ProductCreate, ProductUpdate
from ..stores.interfaces.object_store import IObjectStore
from ..stores.interfaces.record_store import IRecordStore
from .interfaces.product_repository import IProductRepository
from .interfaces.resource_repository import Fields
from .resource_repository import PRODUCT, ResourceRepository, parse_fields
from .update_composer import ProductUpdateComposer, image_change_from


class ProductRepository(ResourceRepository[Product], IProductRepository):
    """Products, with image references resolved on every read and write.

    Uploading an image and writing the row are two separate steps. If the
    write fails after a successful upload, the object stays in the bucket
    unreferenced; this is logged but not cleaned up.
    """

    def __init__(
        self,
        records: IRecordStore,
        objects: IObjectStore,
        page_size: Optional[int] = None,
    ):
        super().__init__(PRODUCT, records, page_size)
        self._resolver = ImageResolver(objects)
        self._uploader = ImageUploader(objects)
        self._composer = ProductUpdateComposer(self._uploader)

    def _to_entity(self, row: dict) -> Product:
        return Product.from_dict(row).with_image(self._resolver.resolve)

    async def _write_after_upload(self, write, uploaded_key: Optional[str]) -> dict:
        try:
            return await write
        except CatalogError:
            if uploaded_key:
                log.warn(self._context, "uploaded image left orphaned", key=uploaded_key)
            raise

    async def upload_image(self, file: ImageFile) -> str:
        with self._operation("upload_image"):
            return await self._uploader.upload(file)

    async def create(self, fields: Fields) -> Product:
        with self._operation("create"):
            data: ProductCreate = parse_fields(ProductCreate, fields)

            uploaded_key = None
            image_ref = data.image_url or None
            if data.image_file is not None:
                uploaded_key = await self._uploader.upload(data.image_file)
                image_ref = uploaded_key

            values = {**data.record_fields(), IMAGE_FIELD: image_ref}
            row = await self._write_after_upload(
                self._records.insert(self.kind.table, values), uploaded_key
            )

        log.info(self._context, "created", id=row.get("id"), image=image_ref)
        return self._to_entity(row)

    async def update(self, record_id: Any, fields: Fields) -> Product:
        with self._operation("update", record_id):
            data: ProductUpdate = parse_fields(ProductUpdate, fields)
            change = image_change_from(data)
            payload = await self._composer.compose(change, data.record_fields())
            if not payload:
                raise ValidationRejected("Nothing to update", code="input")

            uploaded_key = payload[IMAGE_FIELD] if isinstance(change, Upload) else None
            row = await self._write_after_upload(
                self._records.update(self.kind.table, record_id, payload), uploaded_key
            )

        log.info(
            self._context,
            "updated",
            id=record_id,
            fields=sorted(payload),
            image=type(change).__name__,
        )
        return self._to_entity(row)
