"""Builds the outgoing payload of a partial product update."""

from ..constants.resources import IMAGE_FIELD
from ..domain.image import Clear, ImageChange, Replace, Unset, Upload
from ..images.uploads import ImageUploader
from ..models.product import ProductUpdate


def image_change_from(update: ProductUpdate) -> ImageChange:
    """Classifies what the caller asked for regarding the image.

    A file always wins. Otherwise `image_url` counts only when it was passed
    explicitly; an explicit None or "" means clear.
    """
    if update.image_file is not None:
        return Upload(update.image_file)
    if IMAGE_FIELD in update.model_fields_set:
        if update.image_url:
            return Replace(update.image_url)
        return Clear()
    return Unset()


class ProductUpdateComposer:
    """Decides whether and how an update touches the image column."""

    def __init__(self, uploader: ImageUploader):
        self._uploader = uploader

    async def compose(self, change: ImageChange, base_fields: dict) -> dict:
        """Returns the payload to send to the record store.

        The image column is present only for Upload, Replace and Clear;
        for Unset the key is left out entirely so the stored value is kept.
        """
        payload = {k: v for k, v in base_fields.items() if k != IMAGE_FIELD}

        if isinstance(change, Upload):
            payload[IMAGE_FIELD] = await self._uploader.upload(change.file)
        elif isinstance(change, Replace):
            payload[IMAGE_FIELD] = change.url
        elif isinstance(change, Clear):
            payload[IMAGE_FIELD] = None
        elif not isinstance(change, Unset):
            raise TypeError(f"Unknown image change: {change!r}")

        return payload
