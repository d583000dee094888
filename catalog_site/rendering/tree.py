"""
Visual tree.

Renderers build Element trees instead of touching a document; the HTML
adapter turns a tree into markup. Tests inspect trees directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class Element:
    """A tag with attributes, optional text and child elements."""
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    text: str = ""

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def append(self, child: Optional["Element"]) -> "Element":
        """Append a child (None is ignored) and return self."""
        if child is not None:
            self.children.append(child)
        return self

    def iter(self) -> Iterator["Element"]:
        """Depth-first iteration, self included."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: Optional[str] = None, class_: Optional[str] = None) -> List["Element"]:
        return [
            el for el in self.iter()
            if (tag is None or el.tag == tag) and (class_ is None or el.has_class(class_))
        ]

    def find(self, tag: Optional[str] = None, class_: Optional[str] = None) -> Optional["Element"]:
        found = self.find_all(tag, class_)
        return found[0] if found else None

    def get_text(self) -> str:
        """Concatenated text of this element and its descendants."""
        return "".join(el.text for el in self.iter())


def el(tag: str, class_: str = "", text: str = "", children=None, **attrs: str) -> Element:
    """
    Shorthand Element constructor.

    Keyword attributes use underscores for dashes (data_index -> data-index).
    """
    attributes = {key.replace("_", "-"): str(value) for key, value in attrs.items()}
    if class_:
        attributes["class"] = class_
    return Element(tag=tag, attrs=attributes, children=[c for c in (children or []) if c is not None], text=text)
