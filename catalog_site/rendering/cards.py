"""
Listing page rendering: product cards, grid, filters and status panels.

Every function returns an Element tree; nothing here touches a document.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from ..common.constants import MESSAGES, PLACEHOLDER_IMAGE
from ..models import Gallery, Product
from .slider import GallerySlider
from .tree import Element, el

# Swap in the placeholder; stops once the placeholder itself is showing
FALLBACK_HANDLER = (
    "if(this.getAttribute('src')!==this.dataset.fallback)"
    "this.src=this.dataset.fallback;"
)


def default_detail_url(product: Product) -> str:
    return f"product.html?{urlencode({'id': product.product_id})}"


def render_image(
    url: str,
    alt: str,
    placeholder: str = PLACEHOLDER_IMAGE,
    class_: str = "product-image",
    **attrs: str,
) -> Element:
    """<img> that swaps itself for the placeholder if the file fails to load."""
    return el(
        "img", class_,
        src=url,
        alt=alt,
        loading="lazy",
        data_fallback=placeholder,
        onerror=FALLBACK_HANDLER,
        **attrs,
    )


def render_card_gallery(
    gallery: Gallery,
    alt: str,
    placeholder: str = PLACEHOLDER_IMAGE,
    slider: Optional[GallerySlider] = None,
) -> Element:
    """
    Image block of a card: a single image, or a slider with arrows and dots.
    """
    container = el("div", "product-image-container", data_count=len(gallery))

    if len(gallery) == 1:
        return container.append(
            render_image(gallery.main_image, alt, placeholder, "product-image main-image")
        )

    slider = slider or GallerySlider(len(gallery))
    container.attrs["class"] += " image-slider"
    container.attrs["data-index"] = str(slider.index)

    container.append(render_image(
        gallery[slider.index], alt, placeholder, "product-image main-image",
        data_index=slider.index,
    ))
    container.append(el(
        "button", "slider-arrow slider-prev", text="‹",
        type="button", aria_label="Anterior",
        **({"disabled": "disabled"} if slider.is_first else {}),
    ))
    container.append(el(
        "button", "slider-arrow slider-next", text="›",
        type="button", aria_label="Siguiente",
        **({"disabled": "disabled"} if slider.is_last else {}),
    ))

    dots = el("div", "slider-dots")
    for index, url in enumerate(gallery):
        dots.append(el(
            "button",
            "slider-dot active" if slider.is_active(index) else "slider-dot",
            type="button",
            data_index=index,
            data_src=url,
            aria_label=f"Imagen {index + 1}",
        ))
    return container.append(dots)


def render_card(
    product: Product,
    gallery: Gallery,
    slider: Optional[GallerySlider] = None,
    placeholder: str = PLACEHOLDER_IMAGE,
    detail_url: Optional[str] = None,
) -> Element:
    """
    Build one product card.

    The data-* attributes carry the fields the client-side filter matches on.
    """
    href = detail_url or default_detail_url(product)
    card = el(
        "div", "product-card",
        data_id=product.product_id,
        data_name=product.name,
        data_brand=product.brand,
        data_presentation=product.presentation,
        data_category=product.product_type,
    )
    card.append(render_card_gallery(gallery, f"Producto {product.product_id}", placeholder, slider))

    info = el("div", "product-info", children=[
        el("h2", "product-name", children=[el("a", "product-link", text=product.name, href=href)]),
        el("span", "product-category", text=product.product_type),
        el("div", "product-price", text=product.price),
        el("div", "product-brand", children=[
            el("strong", text=MESSAGES["brand_label"]),
            el("span", text=f" {product.brand}"),
        ]),
        el("div", "product-presentation", children=[
            el("strong", text=MESSAGES["size_label"]),
            el("span", text=f" {product.presentation}"),
        ]),
        el("a", "view-details", text=MESSAGES["view_details"], href=href),
    ])
    return card.append(info)


def render_grid(
    items: Iterable[Tuple[Product, Gallery]],
    placeholder: str = PLACEHOLDER_IMAGE,
    detail_url_for: Callable[[Product], str] = default_detail_url,
) -> Element:
    """Grid of cards; the no-results panel when there is nothing to show."""
    cards = [
        render_card(product, gallery, placeholder=placeholder, detail_url=detail_url_for(product))
        for product, gallery in items
    ]
    if not cards:
        return render_no_results()
    return el("div", "product-grid", children=cards)


def render_no_results() -> Element:
    return el("div", "no-results", children=[
        el("h2", text=MESSAGES["no_results_title"]),
        el("p", text=MESSAGES["no_results_hint"]),
    ])


def render_error_panel(
    message: str,
    title: str = MESSAGES["load_error_title"],
    hint: Optional[str] = None,
) -> Element:
    panel = el("div", "error", children=[el("h2", text=title), el("p", text=message)])
    if hint:
        panel.append(el("p", text=hint))
    return panel


def render_not_found(message: str = MESSAGES["unknown_id"]) -> Element:
    return el("div", "error not-found", children=[
        el("h2", text=MESSAGES["not_found_title"]),
        el("p", text=message),
        el("a", "back-link", text=MESSAGES["back_to_catalog"], href="index.html"),
    ])


def _select(
    select_id: str,
    name: str,
    all_label: str,
    options: List[str],
    selected: str,
) -> Element:
    select = el("select", "filter-select", id=select_id, name=name)
    select.append(el("option", text=all_label, value=""))
    for option in options:
        attrs = {"value": option}
        if option == selected:
            attrs["selected"] = "selected"
        select.append(Element(tag="option", attrs=attrs, text=option))
    return select


def render_filters(
    categories: List[str],
    brands: List[str],
    search: str = "",
    category: str = "",
    brand: str = "",
    server_side: bool = False,
) -> Element:
    """
    Search box and category/brand dropdowns, current values preselected.

    A server-side form submits its GET query instead of filtering in the
    browser.
    """
    form = el("form", "filters", id="filters", method="get", action="", children=[
        el("input", "search-input", id="searchInput", name="q", type="search",
           value=search, placeholder=MESSAGES["search_placeholder"]),
        _select("categoryFilter", "category", MESSAGES["all_categories"], categories, category),
        _select("brandFilter", "brand", MESSAGES["all_brands"], brands, brand),
    ])
    if server_side:
        form.attrs["data-server"] = "1"
        form.append(el("button", "filter-submit", text="Buscar", type="submit"))
    return form
