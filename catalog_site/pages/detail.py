"""
Detail page controller.

Selects one product by the `id` query parameter. A missing or unknown id
renders the not-found panel; a failed load renders the error panel.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Union
from urllib.parse import parse_qs

from ..common.constants import MESSAGES
from ..models import Product
from ..rendering import Element, render_detail, render_error_panel, render_not_found
from .base import CatalogPage

logger = logging.getLogger(__name__)

Query = Union[str, Mapping[str, str], None]


def product_id_from_query(query: Query) -> Optional[str]:
    """
    Extract the product id from a query string ("?id=7") or mapping.

    Returns:
        The stripped id, or None when absent or blank
    """
    if query is None:
        return None

    if isinstance(query, str):
        values = parse_qs(query.lstrip("?")).get("id")
        value = values[0] if values else None
    else:
        value = query.get("id")

    value = (value or "").strip()
    return value or None


class DetailPage(CatalogPage):
    """Gallery, information and contact link for a single product."""

    product: Optional[Product] = None

    @property
    def title(self) -> str:
        if self.product is None:
            return self.settings.store_name
        return f"{self.product.name} - {self.settings.store_name}"

    def view(self, query: Query = None) -> List[Element]:
        """
        Render the detail body for a query.

        Args:
            query: Query string or mapping carrying `id`

        Returns:
            Single-element list: detail block, not-found panel or error panel
        """
        self.product = None
        product_id = product_id_from_query(query)
        if product_id is None:
            return [render_not_found(MESSAGES["missing_id"])]

        if not self.load():
            return [render_error_panel(str(self.error), title=MESSAGES["detail_error_title"])]

        product = self.store.find(product_id)
        if product is None:
            logger.info("Product %s not in catalog", product_id)
            return [render_not_found(MESSAGES["unknown_id"])]

        self.product = product
        return [self.render_product(product)]

    def render_product(self, product: Product) -> Element:
        return render_detail(
            product,
            self.gallery_for(product),
            contact_link=self.contact_link_for(product),
            placeholder=self.settings.images.placeholder,
        )
