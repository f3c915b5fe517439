"""
Immutable HTML document tree.

Pages are built from plain constructor calls:

    Element("p", {"class": "lead"}, [Text("Hello "), Element("b", {}, [Text("you")])])

and turned into markup exactly once by `serialize`. Text and attribute
values are escaped on the way out; `Markup` carries an HTML fragment that has
already been sanitized and is written verbatim.
"""
import html
from dataclasses import dataclass, field
from typing import Tuple, Union

# Elements that never have children or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Markup:
    html: str


@dataclass(frozen=True)
class Fragment:
    children: Tuple["Node", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", _as_nodes(self.children))


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = field(default=())

    def __post_init__(self):
        attributes = self.attributes
        if isinstance(attributes, dict):
            attributes = attributes.items()
        object.__setattr__(self, "attributes", tuple((str(k), str(v)) for k, v in attributes))
        object.__setattr__(self, "children", _as_nodes(self.children))
        if self.tag in VOID_ELEMENTS and self.children:
            raise ValueError(f"<{self.tag}> cannot have children")


Node = Union[Element, Text, Markup, Fragment]


def _as_nodes(children) -> tuple:
    """Freeze children into a tuple, promoting bare strings to Text and dropping None."""
    nodes = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, str):
            child = Text(child)
        if not isinstance(child, (Element, Text, Markup, Fragment)):
            raise TypeError(f"Not a document node: {child!r}")
        nodes.append(child)
    return tuple(nodes)


def h(tag: str, attributes=None, *children) -> Element:
    """Shorthand for Element(tag, attributes, children)."""
    return Element(tag, attributes or (), children)


def serialize(node: Node) -> str:
    """Write a document tree out as an HTML string."""
    parts = []
    _write(node, parts)
    return "".join(parts)


def _write(node: Node, parts: list):
    if isinstance(node, Text):
        parts.append(html.escape(node.value, quote=False))
    elif isinstance(node, Markup):
        parts.append(node.html)
    elif isinstance(node, Fragment):
        for child in node.children:
            _write(child, parts)
    elif isinstance(node, Element):
        attrs = "".join(f' {k}="{html.escape(v, quote=True)}"' for k, v in node.attributes)
        parts.append(f"<{node.tag}{attrs}>")
        if node.tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _write(child, parts)
        parts.append(f"</{node.tag}>")
    else:
        raise TypeError(f"Not a document node: {node!r}")
