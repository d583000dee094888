"""Tests for catalog_site/pages/listing.py"""

from unittest.mock import patch

from catalog_site.catalog import load_products
from catalog_site.common.constants import MESSAGES
from catalog_site.pages import ListingPage


def card_ids(grid):
    return [card.attrs["data-id"] for card in grid.find_all(class_="product-card")]


class TestListingPage:
    def test_view_renders_filters_and_grid(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            filters, grid = page.view()
        assert filters.attrs["id"] == "filters"
        assert card_ids(grid) == ["1", "2", "3", "7"]

    def test_dropdown_options(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            filters, _grid = page.view()
        brand_select = filters.find_all("select")[1]
        values = [o.attrs["value"] for o in brand_select.find_all("option")]
        assert values == ["", "Eucerin", "La Roche-Posay", "Nivea"]

    def test_filters_applied(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            _filters, grid = page.view(search="SERUM", brand="La Roche-Posay")
        assert card_ids(grid) == ["7"]

    def test_no_results(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            _filters, grid = page.view(search="perfume")
        assert grid.has_class("no-results")

    def test_galleries_resolved_from_manifest(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            _filters, grid = page.view()
        cards = {card.attrs["data-id"]: card for card in grid.find_all(class_="product-card")}
        assert len(cards["1"].find_all("button", "slider-dot")) == 3
        assert len(cards["7"].find_all("button", "slider-dot")) == 2
        assert cards["2"].find("img").attrs["src"] == "images/placeholder.svg"

    def test_missing_csv_renders_error_panel(self, settings, catalog_root):
        (catalog_root / "products.csv").unlink()
        with ListingPage(settings, root=catalog_root) as page:
            body = page.view()
        assert len(body) == 1
        assert body[0].has_class("error")
        assert MESSAGES["csv_unavailable"] in body[0].get_text()
        assert page.visible_products() == []

    def test_missing_manifest_renders_error_panel(self, settings, catalog_root):
        (catalog_root / "images" / "images.json").unlink()
        with ListingPage(settings, root=catalog_root) as page:
            body = page.view()
        assert body[0].has_class("error")
        assert MESSAGES["manifest_unavailable"] in body[0].get_text()

    def test_catalog_loaded_once(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            with patch("catalog_site.pages.base.load_products", wraps=load_products) as mock_load:
                page.view()
                page.view(search="nivea")
        assert mock_load.call_count == 1

    def test_gallery_cached(self, settings, catalog_root):
        with ListingPage(settings, root=catalog_root) as page:
            page.load()
            product = page.store.get("7")
            assert page.gallery_for(product) is page.gallery_for(product)

    def test_title(self, settings, catalog_root):
        assert ListingPage(settings, root=catalog_root).title == "Crystal Beauty"
