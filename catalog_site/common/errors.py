"""
Catalog exceptions.

Page controllers catch CatalogError at their boundary and turn it into an
inline panel; scripts log it and exit non-zero.
"""


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogLoadError(CatalogError):
    """The products CSV or the image manifest could not be loaded."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class ProductNotFoundError(CatalogError):
    """No product with the requested ID exists in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id!r}")
        self.product_id = product_id
