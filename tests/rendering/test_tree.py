"""Tests for catalog_site/rendering/tree.py"""

from catalog_site.rendering import Element, el


class TestEl:
    def test_underscore_attrs_become_dashes(self):
        node = el("img", data_index=2, aria_label="x")
        assert node.attrs == {"data-index": "2", "aria-label": "x"}

    def test_class_and_text(self):
        node = el("span", "price tag", text="₡100")
        assert node.classes == ["price", "tag"]
        assert node.has_class("tag")
        assert node.text == "₡100"

    def test_none_children_dropped(self):
        assert el("div", children=[None, el("p")]).children == [el("p")]


class TestElement:
    def test_find_all_by_tag_and_class(self):
        tree = el("div", children=[
            el("p", "a"),
            el("section", children=[el("p", "a b"), el("p", "b")]),
        ])
        assert len(tree.find_all("p")) == 3
        assert len(tree.find_all("p", "a")) == 2
        assert tree.find("section") is tree.children[1]
        assert tree.find("table") is None

    def test_get_text(self):
        tree = el("div", text="a", children=[el("span", text="b"), el("span", text="c")])
        assert tree.get_text() == "abc"

    def test_append_ignores_none(self):
        node = Element("div")
        assert node.append(None) is node
        assert node.children == []
