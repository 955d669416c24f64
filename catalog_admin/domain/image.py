"""Requested change to a product's image reference.

An update either leaves the image alone, clears it, points it at a URL, or
replaces it with a freshly uploaded file. Each case is its own type so
"not mentioned" can never be confused with "explicitly empty".
"""

from dataclasses import dataclass
from typing import Union

from ..models.product import ImageFile


@dataclass(frozen=True)
class Unset:
    """The caller did not mention the image."""


@dataclass(frozen=True)
class Clear:
    """The caller wants the image removed."""


@dataclass(frozen=True)
class Replace:
    """The caller supplied a URL (or key) to store as-is."""

    url: str


@dataclass(frozen=True)
class Upload:
    """The caller supplied a file that must be uploaded first."""

    file: ImageFile


ImageChange = Union[Unset, Clear, Replace, Upload]
