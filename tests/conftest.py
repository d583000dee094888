"""Shared test fixtures."""

import json

import pytest

from catalog_site.common.config_loader import CatalogSettings, ContactSettings, ImageSettings
from catalog_site.models import Gallery, Product

SAMPLE_CSV = (
    "ID,Product Name,Product Type,Brand,Selling Price CRC,Presentation,Description\n"
    '1,Hydrating Serum,Skin Care,Eucerin,"₡12,500",30 ml,"Light, fast absorbing"\n'
    "2,Soft Creme,Skin Care,Nivea,₡4500,150 ml,\n"
    "3,Repair Shampoo,Hair Care,Nivea,₡3900,250 ml,\n"
    "4,Broken row,Hair Care,Dove,₡1000,100 ml,unquoted, comma\n"
    "7,Night Serum,Skin Care,La Roche-Posay,₡18000,SERUM 50 ml,Overnight repair\n"
)

SAMPLE_MANIFEST = [
    "1.webp",
    "1-1.webp",
    "1-2.webp",
    "7.webp",
    "7-1.webp",
    "7-3.webp",
    "placeholder.svg",
]


@pytest.fixture
def sample_csv():
    """CSV text with one malformed row (line 5)."""
    return SAMPLE_CSV


@pytest.fixture
def sample_manifest():
    return frozenset(SAMPLE_MANIFEST)


@pytest.fixture
def minimal_product():
    """Create a product with only the required fields."""
    return Product(
        product_id="7",
        name="Night Serum",
        product_type="Skin Care",
        brand="La Roche-Posay",
        price="₡18000",
        presentation="50 ml",
    )


@pytest.fixture
def sample_products():
    """Small product list for filter tests (catalog order)."""
    return [
        Product("1", "Hydrating Serum", "Skin Care", "Eucerin", "₡12,500", "30 ml"),
        Product("2", "Soft Creme", "Skin Care", "Nivea", "₡4500", "150 ml"),
        Product("3", "Repair Shampoo", "Hair Care", "Nivea", "₡3900", "250 ml"),
        Product("7", "Night Cream", "Skin Care", "La Roche-Posay", "₡18000", "Serum 50 ml"),
    ]


@pytest.fixture
def multi_gallery():
    return Gallery(images=("images/7.webp", "images/7-1.webp", "images/7-2.webp"))


@pytest.fixture
def image_settings():
    return ImageSettings()


@pytest.fixture
def settings():
    """Settings pointing at files relative to a catalog root."""
    return CatalogSettings(
        store_name="Crystal Beauty",
        csv_source="products.csv",
        images=ImageSettings(),
        contact=ContactSettings(whatsapp_number="50670935053"),
    )


@pytest.fixture
def catalog_root(tmp_path, sample_csv):
    """A catalog directory with products.csv, images/ and images.json."""
    (tmp_path / "products.csv").write_text(sample_csv, encoding="utf-8")
    images = tmp_path / "images"
    images.mkdir()
    for name in SAMPLE_MANIFEST:
        (images / name).write_bytes(b"img")
    (images / "images.json").write_text(json.dumps(SAMPLE_MANIFEST), encoding="utf-8")
    return tmp_path
