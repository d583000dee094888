"""
Product data models.

Pure data classes for the catalog: a parsed product and its resolved
image gallery. No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from ..common.constants import (
    FIELD_BRAND,
    FIELD_DESCRIPTION,
    FIELD_ID,
    FIELD_NAME,
    FIELD_PHOTO,
    FIELD_PRESENTATION,
    FIELD_PRICE,
    FIELD_TYPE,
)


@dataclass(frozen=True)
class Product:
    """
    One catalog product, built from a parsed CSV record.

    Price is kept as the literal CSV text (e.g. "₡12,500"); it is never
    parsed or reformatted.
    """

    product_id: str
    name: str
    product_type: str = ""
    brand: str = ""
    price: str = ""
    presentation: str = ""
    description: str = ""   # Optional column
    photo: str = ""         # Optional column, unused by the resolver
    record: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        # Freeze the raw record as well
        object.__setattr__(self, "record", MappingProxyType(dict(self.record)))

    @classmethod
    def from_record(cls, record: Mapping[str, str]) -> "Product":
        """Create a Product from a CSV record (header name -> value)."""
        return cls(
            product_id=record.get(FIELD_ID, ""),
            name=record.get(FIELD_NAME, ""),
            product_type=record.get(FIELD_TYPE, ""),
            brand=record.get(FIELD_BRAND, ""),
            price=record.get(FIELD_PRICE, ""),
            presentation=record.get(FIELD_PRESENTATION, ""),
            description=record.get(FIELD_DESCRIPTION, ""),
            photo=record.get(FIELD_PHOTO, ""),
            record=record,
        )


@dataclass(frozen=True)
class Gallery:
    """
    Ordered image URLs for one product; index 0 is the main image.

    A gallery is never empty: when no content image exists it holds exactly
    the placeholder URL and is_placeholder is True.
    """

    images: Tuple[str, ...]
    is_placeholder: bool = False

    def __post_init__(self):
        if not self.images:
            raise ValueError("Gallery must contain at least one image")
        object.__setattr__(self, "images", tuple(self.images))

    @classmethod
    def placeholder(cls, url: str) -> "Gallery":
        return cls(images=(url,), is_placeholder=True)

    @property
    def main_image(self) -> str:
        return self.images[0]

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self):
        return iter(self.images)

    def __getitem__(self, index: int) -> str:
        return self.images[index]
