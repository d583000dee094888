"""
Listing page controller.

Usage:
    page = ListingPage(load_settings())
    body = page.view(search="serum", category="Skin Care")
    html = render_document(page.title, body)
"""

from __future__ import annotations

import logging
from typing import Callable, List

from ..common.constants import MESSAGES
from ..models import Product
from ..rendering import Element, render_error_panel, render_filters, render_grid
from ..rendering.cards import default_detail_url
from .base import CatalogPage

logger = logging.getLogger(__name__)


class ListingPage(CatalogPage):
    """Filterable grid of product cards."""

    detail_url_for: Callable[[Product], str] = staticmethod(default_detail_url)

    @property
    def title(self) -> str:
        return self.settings.store_name

    def visible_products(self, search: str = "", category: str = "", brand: str = "") -> List[Product]:
        """Products passing the filters, or an empty list if the catalog failed to load."""
        if not self.load():
            return []
        return self.store.filter(search, category, brand)

    def view(
        self,
        search: str = "",
        category: str = "",
        brand: str = "",
        server_side: bool = False,
    ) -> List[Element]:
        """
        Render the listing body for the given filter state.

        Returns:
            [filters, grid] (grid may be the no-results panel), or
            [error panel] when the catalog could not be loaded
        """
        if not self.load():
            return [render_error_panel(str(self.error), hint=MESSAGES["load_error_hint"])]

        products = self.store.filter(search, category, brand)
        logger.debug("Filter q=%r category=%r brand=%r -> %d products",
                     search, category, brand, len(products))

        filters = render_filters(
            self.store.categories,
            self.store.brands,
            search=search,
            category=category,
            brand=brand,
            server_side=server_side,
        )
        grid = render_grid(
            ((product, self.gallery_for(product)) for product in products),
            placeholder=self.settings.images.placeholder,
            detail_url_for=self.detail_url_for,
        )
        return [filters, grid]
