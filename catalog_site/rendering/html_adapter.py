"""
HTML adapter.

Translates Element trees into BeautifulSoup tags and whole documents.
Text is escaped by BeautifulSoup on output.
"""

from __future__ import annotations

from typing import Iterable, Optional

from bs4 import BeautifulSoup, Tag

from .tree import Element

DOCUMENT_SKELETON = (
    '<!DOCTYPE html>'
    '<html lang="es"><head><meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    '<title></title></head><body></body></html>'
)


def to_tag(element: Element, soup: BeautifulSoup) -> Tag:
    """Create a soup Tag (with descendants) for an Element."""
    tag = soup.new_tag(element.tag, attrs=dict(element.attrs))
    if element.text:
        tag.append(element.text)
    for child in element.children:
        tag.append(to_tag(child, soup))
    return tag


def to_html(element: Element) -> str:
    """Serialize a single Element tree to an HTML fragment."""
    soup = BeautifulSoup("", "lxml")
    return str(to_tag(element, soup))


def render_document(
    title: str,
    body: Iterable[Element],
    stylesheets: Iterable[str] = (),
    scripts: Iterable[str] = (),
    header: Optional[Element] = None,
) -> str:
    """
    Build a complete HTML page.

    Args:
        title: Document title
        body: Elements placed inside <main id="content">
        stylesheets: Stylesheet hrefs for <head>
        scripts: Script srcs appended at the end of <body>
        header: Optional page header element

    Returns:
        HTML document as a string
    """
    soup = BeautifulSoup(DOCUMENT_SKELETON, "lxml")
    soup.title.string = title

    for href in stylesheets:
        soup.head.append(soup.new_tag("link", attrs={"rel": "stylesheet", "href": href}))

    if header is not None:
        soup.body.append(to_tag(header, soup))

    main = soup.new_tag("main", attrs={"id": "content"})
    for element in body:
        main.append(to_tag(element, soup))
    soup.body.append(main)

    for src in scripts:
        soup.body.append(soup.new_tag("script", attrs={"src": src, "defer": "defer"}))

    return str(soup)
