"""Tests for catalog_site/catalog/store.py"""

import pytest

from catalog_site.catalog import (
    CatalogStore,
    brand_options,
    category_options,
    filter_products,
    matches_search,
)
from catalog_site.common.errors import ProductNotFoundError
from catalog_site.models import Product


def ids(products):
    return [p.product_id for p in products]


class TestMatchesSearch:
    def test_empty_term_matches(self, minimal_product):
        assert matches_search(minimal_product, "")

    def test_case_insensitive_name(self, minimal_product):
        assert matches_search(minimal_product, "NIGHT")

    def test_matches_brand(self, minimal_product):
        assert matches_search(minimal_product, "roche")

    def test_matches_presentation(self, minimal_product):
        assert matches_search(minimal_product, "50 ML")

    def test_category_not_searched(self, minimal_product):
        assert not matches_search(minimal_product, "skin care")


class TestFilterProducts:
    def test_search_across_fields(self, sample_products):
        # "serum" is in product 1's name and product 7's presentation
        assert ids(filter_products(sample_products, search="serum")) == ["1", "7"]

    def test_category_and_brand(self, sample_products):
        result = filter_products(sample_products, category="Skin Care", brand="Nivea")
        assert ids(result) == ["2"]

    def test_no_filters_returns_all_in_order(self, sample_products):
        assert ids(filter_products(sample_products)) == ["1", "2", "3", "7"]

    def test_none_filters_mean_any(self, sample_products):
        assert len(filter_products(sample_products, category=None, brand=None)) == 4

    def test_category_is_exact(self, sample_products):
        assert filter_products(sample_products, category="skin care") == []

    def test_all_filters_must_match(self, sample_products):
        assert filter_products(sample_products, search="shampoo", category="Skin Care") == []

    def test_no_match(self, sample_products):
        assert filter_products(sample_products, search="xyz") == []


class TestOptions:
    def test_brand_options_sorted_unique(self, sample_products):
        assert brand_options(sample_products) == ["Eucerin", "La Roche-Posay", "Nivea"]

    def test_category_options(self, sample_products):
        assert category_options(sample_products) == ["Hair Care", "Skin Care"]

    def test_empty_values_excluded(self):
        products = [Product("1", "A", brand=""), Product("2", "B", brand="Dove")]
        assert brand_options(products) == ["Dove"]


class TestCatalogStore:
    def test_len_and_iter(self, sample_products):
        store = CatalogStore(sample_products)
        assert len(store) == 4
        assert ids(store) == ["1", "2", "3", "7"]

    def test_filter(self, sample_products):
        store = CatalogStore(sample_products)
        assert ids(store.filter("nivea")) == ["2", "3"]

    def test_find(self, sample_products):
        store = CatalogStore(sample_products)
        assert store.find("3").name == "Repair Shampoo"
        assert store.find("99") is None

    def test_find_returns_first_duplicate(self):
        store = CatalogStore([Product("1", "First"), Product("1", "Second")])
        assert store.find("1").name == "First"

    def test_get_raises_for_unknown(self, sample_products):
        store = CatalogStore(sample_products)
        with pytest.raises(ProductNotFoundError, match="99"):
            store.get("99")

    def test_empty_store(self):
        store = CatalogStore()
        assert len(store) == 0
        assert store.categories == []
        assert store.brands == []
