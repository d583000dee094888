"""Tests for catalog_site/rendering/html_adapter.py"""

from bs4 import BeautifulSoup

from catalog_site.rendering import el, render_document, to_html


class TestToHtml:
    def test_fragment(self):
        html = to_html(el("div", "card", data_id="7", children=[el("span", text="Nivea")]))
        soup = BeautifulSoup(html, "html.parser")
        div = soup.find("div", class_="card")
        assert div["data-id"] == "7"
        assert div.span.get_text() == "Nivea"

    def test_text_is_escaped(self):
        html = to_html(el("p", text="<script>alert(1)</script> & co"))
        assert "<script>" not in html
        assert "&amp; co" in html


class TestRenderDocument:
    def test_document_structure(self):
        html = render_document(
            "Crystal Beauty",
            [el("div", "product-grid")],
            stylesheets=["assets/catalog.css"],
            scripts=["assets/catalog.js"],
            header=el("header", "site-header"),
        )
        soup = BeautifulSoup(html, "html.parser")
        assert soup.title.string == "Crystal Beauty"
        assert soup.html["lang"] == "es"
        assert soup.head.find("link")["href"] == "assets/catalog.css"
        assert soup.find("main", id="content").find("div", class_="product-grid") is not None
        assert soup.body.find("script")["src"] == "assets/catalog.js"
        assert soup.body.find("header") is not None
