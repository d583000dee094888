"""
Page controllers.

Modules:
    base    - CatalogPage: per-page state (products, resolver, gallery cache)
    listing - ListingPage: filters and product grid
    detail  - DetailPage: single product by ?id=
"""

from .base import CatalogPage
from .detail import DetailPage, product_id_from_query
from .listing import ListingPage

__all__ = [
    'CatalogPage',
    'DetailPage',
    'ListingPage',
    'product_id_from_query',
]
