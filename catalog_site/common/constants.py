"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# CSV column names (header row of products.csv)
FIELD_ID = "ID"
FIELD_NAME = "Product Name"
FIELD_TYPE = "Product Type"
FIELD_BRAND = "Brand"
FIELD_PRICE = "Selling Price CRC"
FIELD_PRESENTATION = "Presentation"
FIELD_DESCRIPTION = "Description"
FIELD_PHOTO = "Product Photo"

REQUIRED_FIELDS = (
    FIELD_ID,
    FIELD_NAME,
    FIELD_TYPE,
    FIELD_BRAND,
    FIELD_PRICE,
    FIELD_PRESENTATION,
)

# Gallery defaults
PLACEHOLDER_IMAGE = "images/placeholder.svg"
DEFAULT_IMAGE_EXTENSIONS = ("webp",)
MAX_ADDITIONAL_IMAGES = 5
FIRST_ADDITIONAL_INDEX = 1

# Horizontal swipe distance (px) that moves the slider
SWIPE_THRESHOLD = 50

# Outbound contact link
WHATSAPP_URL = "https://wa.me/{number}?text={text}"
DEFAULT_CONTACT_MESSAGE = "Hola! Me interesa el producto: {name} ({brand}) - {price}"
CONTACT_FIELDS = ("name", "brand", "price")

USER_AGENT = "Mozilla/5.0 (compatible; catalog-site/1.0)"

# User-facing strings (fixed, Spanish)
MESSAGES = {
    "load_error_title": "⚠️ Error Cargando Productos",
    "load_error_hint": (
        "Asegúrate de que products.csv esté en el mismo directorio que este archivo HTML."
    ),
    "csv_unavailable": "No se pudo cargar products.csv",
    "manifest_unavailable": "No se pudo cargar la lista de imágenes",
    "detail_error_title": "⚠️ Error al cargar el producto",
    "not_found_title": "⚠️ Producto no encontrado",
    "missing_id": "No se especificó un producto válido.",
    "unknown_id": "Producto no encontrado",
    "no_results_title": "No se Encontraron Productos",
    "no_results_hint": "Intenta ajustar tus filtros o términos de búsqueda.",
    "search_placeholder": "Buscar productos...",
    "all_categories": "Todas las categorías",
    "all_brands": "Todas las marcas",
    "brand_label": "Marca:",
    "size_label": "Tamaño:",
    "presentation_label": "Presentación:",
    "category_label": "Categoría:",
    "contact_button": "💬 Consultar por WhatsApp",
    "view_details": "Ver detalles",
    "back_to_catalog": "← Volver al catálogo",
}
