from .resolver import ImageResolver, is_external
from .uploads import ImageUploader, name_for

__all__ = ["ImageResolver", "is_external", "ImageUploader", "name_for"]
