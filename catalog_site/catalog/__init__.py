"""
Catalog loading and querying.

Modules:
    loader - Fetch products.csv from a path or URL
    store  - CatalogStore, filtering and dropdown options
"""

from .loader import create_session, fetch_text, is_remote, load_products
from .store import (
    CatalogStore,
    brand_options,
    category_options,
    filter_products,
    find_product,
    matches_search,
)

__all__ = [
    # Loading
    'create_session',
    'fetch_text',
    'is_remote',
    'load_products',
    # Store
    'CatalogStore',
    'brand_options',
    'category_options',
    'filter_products',
    'find_product',
    'matches_search',
]
