"""
Shared page-controller state.

A controller is created per page load and owns everything that page
needs: the loaded products, the image resolver and a gallery cache.
Load failures are kept on the controller, never raised to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import requests

from ..catalog import CatalogStore, create_session, is_remote, load_products
from ..common.config_loader import CatalogSettings
from ..common.errors import CatalogLoadError
from ..images import ImageResolver, get_resolver, load_manifest
from ..models import Gallery, Product
from ..rendering import build_contact_link

logger = logging.getLogger(__name__)


class CatalogPage:
    """Base controller: loading, gallery resolution and contact links."""

    def __init__(
        self,
        settings: CatalogSettings,
        session: Optional[requests.Session] = None,
        root: str | Path = ".",
    ):
        """
        Initialize the controller.

        Args:
            settings: Catalog settings
            session: Shared requests session (created if omitted)
            root: Directory that local CSV, manifest and image paths are relative to
        """
        self.settings = settings
        self.session = session or create_session()
        self.root = Path(root)

        self.store: Optional[CatalogStore] = None
        self.resolver: Optional[ImageResolver] = None
        self.error: Optional[CatalogLoadError] = None
        self._galleries: Dict[str, Gallery] = {}

    @property
    def loaded(self) -> bool:
        return self.store is not None

    def resolve_source(self, source: str) -> str:
        """Local sources are relative to the page root; URLs are used as-is."""
        return source if is_remote(source) else str(self.root / source)

    def load(self) -> bool:
        """
        Load the image manifest (manifest strategy) and the products CSV.

        Returns:
            True on success; on failure the error is kept in self.error
        """
        if self.loaded:
            return True

        images = self.settings.images
        try:
            manifest = None
            if images.strategy == "manifest":
                manifest = load_manifest(self.resolve_source(images.manifest), self.session)
            products = load_products(self.resolve_source(self.settings.csv_source), self.session)
        except CatalogLoadError as e:
            logger.warning("Catalog load failed (%s): %s", e.source, e)
            self.error = e
            return False

        self.error = None
        self.store = CatalogStore(products)
        self.resolver = get_resolver(images, manifest=manifest, session=self.session, root=self.root)
        return True

    def adopt(self, other: "CatalogPage") -> None:
        """Share another controller's loaded catalog, resolver and gallery cache."""
        self.store = other.store
        self.resolver = other.resolver
        self.error = other.error
        self._galleries = other._galleries

    def gallery_for(self, product: Product) -> Gallery:
        """Resolve (once) and return the gallery of a loaded product."""
        if self.resolver is None:
            raise RuntimeError("Page not loaded")

        gallery = self._galleries.get(product.product_id)
        if gallery is None:
            gallery = self.resolver.resolve(product.product_id)
            self._galleries[product.product_id] = gallery
        return gallery

    def contact_link_for(self, product: Product) -> str:
        contact = self.settings.contact
        if not contact.whatsapp_number:
            return ""
        return build_contact_link(product, contact.whatsapp_number, contact.message)

    def close(self) -> None:
        if self.resolver is not None:
            self.resolver.close()
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
