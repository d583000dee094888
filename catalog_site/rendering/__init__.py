"""
Rendering of catalog pages as visual trees.

Modules:
    tree         - Element data structure
    slider       - GallerySlider state machine
    cards        - Cards, grid, filters and status panels
    detail       - Product detail block
    contact      - WhatsApp contact link
    html_adapter - Element -> BeautifulSoup / HTML
    assets       - catalog.js and catalog.css
"""

from .cards import (
    render_card,
    render_card_gallery,
    render_error_panel,
    render_filters,
    render_grid,
    render_image,
    render_no_results,
    render_not_found,
)
from .contact import build_contact_link, build_contact_message
from .detail import render_detail, render_detail_gallery
from .html_adapter import render_document, to_html, to_tag
from .slider import GallerySlider
from .tree import Element, el

__all__ = [
    'Element',
    'GallerySlider',
    'build_contact_link',
    'build_contact_message',
    'el',
    'render_card',
    'render_card_gallery',
    'render_detail',
    'render_detail_gallery',
    'render_document',
    'render_error_panel',
    'render_filters',
    'render_grid',
    'render_image',
    'render_no_results',
    'render_not_found',
    'to_html',
    'to_tag',
]
