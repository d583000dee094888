"""
Static Site Builder

Writes the catalog as static files:

    index.html              listing (filtering and sliders run in catalog.js)
    product-{id}.html       one detail page per product
    assets/catalog.js|css   client behaviour and styles
    images/...              copied when the image base is a local directory
"""

from __future__ import annotations

import hashlib
import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import requests

from ..catalog import is_remote
from ..common.config_loader import CatalogSettings
from ..common.errors import CatalogLoadError
from ..models import Product
from ..pages import DetailPage, ListingPage
from ..rendering import Element, el, render_document, render_no_results
from ..rendering.assets import CATALOG_CSS, CATALOG_JS

logger = logging.getLogger(__name__)

ASSETS_DIR = "assets"
STYLESHEET = f"{ASSETS_DIR}/catalog.css"
SCRIPT = f"{ASSETS_DIR}/catalog.js"


def detail_filename(product: Product) -> str:
    """
    File name of a product's detail page.

    Unsafe characters are replaced with "_"; a replaced name gets a short
    hash of the raw id so that e.g. "1.0" and "1_0" do not share a file.
    """
    product_id = product.product_id
    safe_id = re.sub(r"[^A-Za-z0-9_-]", "_", product_id)
    if safe_id != product_id:
        digest = hashlib.sha1(product_id.encode("utf-8")).hexdigest()[:8]
        safe_id = f"{safe_id}-{digest}"
    return f"product-{safe_id}.html"


def site_header(store_name: str) -> Element:
    return el("header", "site-header", children=[
        el("a", href="index.html", children=[el("h1", text=store_name)]),
    ])


@dataclass
class BuildResult:
    """Summary of a build."""
    output_dir: Path
    products: int = 0
    placeholders: int = 0
    pages: List[Path] = field(default_factory=list)
    error: Optional[CatalogLoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StaticSiteBuilder:
    """
    Render the whole catalog into a directory of static files.

    Usage:
        builder = StaticSiteBuilder(settings, source_root=".", output_dir="dist")
        result = builder.build()
        if not result.ok:
            ...
    """

    def __init__(
        self,
        settings: CatalogSettings,
        source_root: str | Path = ".",
        output_dir: str | Path = "dist",
        session: Optional[requests.Session] = None,
        copy_images: bool = True,
    ):
        self.settings = settings
        self.source_root = Path(source_root)
        self.output_dir = Path(output_dir)
        self.copy_images = copy_images

        self.listing = ListingPage(settings, session=session, root=self.source_root)
        self.listing.detail_url_for = detail_filename

    def _write(self, name: str, content: str) -> Path:
        path = self.output_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def _document(self, title: str, body: List[Element]) -> str:
        return render_document(
            title,
            body,
            stylesheets=[STYLESHEET],
            scripts=[SCRIPT],
            header=site_header(self.settings.store_name),
        )

    def write_assets(self) -> None:
        self._write(SCRIPT, CATALOG_JS)
        self._write(STYLESHEET, CATALOG_CSS)

    def copy_image_files(self) -> int:
        """Copy the local image directory and placeholder; returns files copied."""
        images = self.settings.images
        copied = 0

        if not is_remote(images.base_path):
            source_dir = self.source_root / images.base_path
            if source_dir.is_dir():
                target_dir = self.output_dir / images.base_path
                shutil.copytree(source_dir, target_dir, dirs_exist_ok=True)
                copied += sum(1 for p in target_dir.rglob("*") if p.is_file())
            else:
                logger.warning("Image directory not found: %s", source_dir)

        placeholder = self.source_root / images.placeholder
        if not is_remote(images.placeholder) and placeholder.is_file():
            target = self.output_dir / images.placeholder
            if not target.exists():
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(placeholder, target)
                copied += 1

        return copied

    def build(self) -> BuildResult:
        """
        Build index, detail pages and assets.

        A catalog load failure still produces an index.html showing the
        error panel; the error is returned in the result.
        """
        result = BuildResult(output_dir=self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.write_assets()

        body = self.listing.view()
        if self.listing.error is not None:
            result.error = self.listing.error
            result.pages.append(self._write("index.html", self._document(self.listing.title, body)))
            logger.error("Catalog not built: %s", result.error)
            return result

        empty = render_no_results()
        empty.attrs.update({"id": "noResults", "hidden": "hidden"})
        body.append(empty)
        result.pages.append(self._write("index.html", self._document(self.listing.title, body)))

        detail = DetailPage(self.settings, session=self.listing.session, root=self.source_root)
        detail.adopt(self.listing)

        for product in self.listing.store:
            if not product.product_id:
                continue
            detail_body = detail.view({"id": product.product_id})
            result.pages.append(self._write(detail_filename(product), self._document(detail.title, detail_body)))
            result.products += 1
            if self.listing.gallery_for(product).is_placeholder:
                result.placeholders += 1

        if self.copy_images:
            copied = self.copy_image_files()
            logger.info("Copied %d image files", copied)

        logger.info("Built %d product pages in %s (%d without images)",
                    result.products, self.output_dir, result.placeholders)
        return result
