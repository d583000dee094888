"""
Catalog Store

Holds the loaded products and answers the listing page's questions:
which products match the current filters, which categories and brands
go in the dropdowns, and which product a detail page asks for.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..common.errors import ProductNotFoundError
from ..models import Product


def matches_search(product: Product, search: str) -> bool:
    """
    Case-insensitive substring match against name, brand and presentation.

    An empty search term matches every product.
    """
    if not search:
        return True

    term = search.lower()
    return (
        term in product.name.lower()
        or term in product.brand.lower()
        or term in product.presentation.lower()
    )


def filter_products(
    products: Iterable[Product],
    search: str = "",
    category: Optional[str] = "",
    brand: Optional[str] = "",
) -> List[Product]:
    """
    Filter products by search term, category and brand (all must match).

    Args:
        products: Products in catalog order
        search: Free-text term (case-insensitive)
        category: Exact Product Type, or empty/None for any
        brand: Exact Brand, or empty/None for any

    Returns:
        Matching products, original order preserved
    """
    return [
        p for p in products
        if matches_search(p, search or "")
        and (not category or p.product_type == category)
        and (not brand or p.brand == brand)
    ]


def distinct_sorted(values: Iterable[str]) -> List[str]:
    """Return the sorted set of non-empty values."""
    return sorted({v for v in values if v})


def category_options(products: Iterable[Product]) -> List[str]:
    """Sorted, duplicate-free categories for the category dropdown."""
    return distinct_sorted(p.product_type for p in products)


def brand_options(products: Iterable[Product]) -> List[str]:
    """
    Sorted, duplicate-free brands for the brand dropdown.

    Example:
        brands ["Nivea", "Eucerin", "Nivea"] -> ["Eucerin", "Nivea"]
    """
    return distinct_sorted(p.brand for p in products)


def find_product(products: Iterable[Product], product_id: str) -> Optional[Product]:
    """Return the first product whose ID equals product_id, or None."""
    for product in products:
        if product.product_id == product_id:
            return product
    return None


class CatalogStore:
    """
    Read-only collection of the products loaded for one page.

    Usage:
        store = CatalogStore(load_products("products.csv"))
        visible = store.filter("serum", category="Skin Care")
        store.categories  # ['Hair Care', 'Skin Care']
    """

    def __init__(self, products: Sequence[Product] = ()):
        self._products: Tuple[Product, ...] = tuple(products)

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products)

    def filter(self, search: str = "", category: str = "", brand: str = "") -> List[Product]:
        return filter_products(self._products, search, category, brand)

    @property
    def categories(self) -> List[str]:
        return category_options(self._products)

    @property
    def brands(self) -> List[str]:
        return brand_options(self._products)

    def find(self, product_id: str) -> Optional[Product]:
        return find_product(self._products, product_id)

    def get(self, product_id: str) -> Product:
        """
        Look up a product by ID.

        Raises:
            ProductNotFoundError: If no product has that ID
        """
        product = self.find(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
