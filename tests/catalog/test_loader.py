"""Tests for catalog_site/catalog/loader.py"""

from unittest.mock import MagicMock

import pytest
import requests

from catalog_site.catalog import fetch_text, is_remote, load_products
from catalog_site.common.constants import MESSAGES
from catalog_site.common.errors import CatalogLoadError


def make_session(text="", ok=True, status_code=200, side_effect=None):
    session = MagicMock()
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.text = text
    response.encoding = "utf-8"
    session.get.return_value = response
    if side_effect is not None:
        session.get.side_effect = side_effect
    return session


class TestIsRemote:
    def test_urls(self):
        assert is_remote("https://example.com/products.csv")
        assert is_remote("HTTP://example.com/products.csv")

    def test_paths(self):
        assert not is_remote("products.csv")
        assert not is_remote("/srv/catalog/products.csv")


class TestFetchText:
    def test_local_file(self, catalog_root):
        text = fetch_text(catalog_root / "products.csv")
        assert text.startswith("ID,Product Name")

    def test_missing_local_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            fetch_text(tmp_path / "missing.csv")
        assert str(exc_info.value) == MESSAGES["csv_unavailable"]
        assert exc_info.value.source.endswith("missing.csv")

    def test_remote_success(self):
        session = make_session(text="ID,Brand\n1,Nivea")
        assert fetch_text("https://example.com/products.csv", session=session) == "ID,Brand\n1,Nivea"
        session.get.assert_called_once()
        session.close.assert_not_called()

    def test_remote_status_error(self):
        session = make_session(ok=False, status_code=404)
        with pytest.raises(CatalogLoadError):
            fetch_text("https://example.com/products.csv", session=session)

    def test_remote_network_error(self):
        session = make_session(side_effect=requests.exceptions.ConnectionError("down"))
        with pytest.raises(CatalogLoadError) as exc_info:
            fetch_text("https://example.com/products.csv", session=session)
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_custom_error_message(self, tmp_path):
        with pytest.raises(CatalogLoadError, match="manifest"):
            fetch_text(tmp_path / "images.json", error_message="manifest gone")


class TestLoadProducts:
    def test_loads_valid_rows(self, catalog_root):
        products = load_products(catalog_root / "products.csv")
        assert [p.product_id for p in products] == ["1", "2", "3", "7"]
        assert products[0].price == "₡12,500"
        assert products[0].description == "Light, fast absorbing"

    def test_remote(self, sample_csv):
        session = make_session(text=sample_csv)
        products = load_products("https://example.com/products.csv", session=session)
        assert len(products) == 4
