"""Table names, bucket names and listing defaults."""


class Tables:
    """Record-store tables backing each resource kind."""

    CATEGORIES = "categories"
    CARRIERS = "carriers"
    PRODUCTS = "products"


PRODUCT_BUCKET = "product"
DEFAULT_PAGE_SIZE = 12
IMAGE_FIELD = "image_url"
