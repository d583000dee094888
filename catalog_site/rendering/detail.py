"""Product detail rendering: gallery with thumbnails, info and contact link."""

from __future__ import annotations

from typing import Optional

from ..common.constants import MESSAGES, PLACEHOLDER_IMAGE
from ..models import Gallery, Product
from .cards import render_image
from .slider import GallerySlider
from .tree import Element, el


def render_detail_gallery(
    gallery: Gallery,
    product_name: str,
    placeholder: str = PLACEHOLDER_IMAGE,
    slider: Optional[GallerySlider] = None,
) -> Element:
    """Main image plus a thumbnail strip when there is more than one image."""
    slider = slider or GallerySlider(len(gallery))
    block = el("div", "product-detail-gallery")

    block.append(el("div", "main-image-container", children=[
        render_image(
            gallery[slider.index], product_name, placeholder,
            "main-product-image", id="mainImage",
        ),
    ]))

    if len(gallery) > 1:
        strip = el("div", "thumbnail-gallery", id="thumbnailGallery")
        for index, url in enumerate(gallery):
            strip.append(render_image(
                url, f"{product_name} - {index + 1}", placeholder,
                "thumbnail active" if slider.is_active(index) else "thumbnail",
                data_index=index,
            ))
        block.append(strip)

    return block


def _info_row(label: str, value: str) -> Element:
    return el("div", "spec-item", children=[
        el("span", "spec-label", text=label),
        el("span", "spec-value", text=value),
    ])


def render_detail(
    product: Product,
    gallery: Gallery,
    contact_link: str = "",
    slider: Optional[GallerySlider] = None,
    placeholder: str = PLACEHOLDER_IMAGE,
) -> Element:
    """
    Build the detail block for one product.

    The description section is omitted when the product has none; the
    contact button is omitted when no link is given.
    """
    info = el("div", "product-detail-info", children=[
        el("div", "detail-tags", children=[
            el("span", "detail-category", text=product.product_type),
            el("span", "detail-brand", text=product.brand),
        ]),
        el("h1", "detail-name", text=product.name),
        el("div", "detail-price", text=product.price),
    ])

    if product.description:
        info.append(el("div", "detail-description", text=product.description))

    info.append(el("div", "detail-specs", children=[
        _info_row(MESSAGES["brand_label"], product.brand),
        _info_row(MESSAGES["presentation_label"], product.presentation),
        _info_row(MESSAGES["category_label"], product.product_type),
    ]))

    if contact_link:
        info.append(el("div", "detail-actions", children=[
            el("a", "whatsapp-btn", text=MESSAGES["contact_button"],
               href=contact_link, target="_blank", rel="noopener"),
        ]))

    return el("div", "product-detail", data_id=product.product_id, children=[
        render_detail_gallery(gallery, product.name, placeholder, slider),
        info,
    ])
