"""Document tree model.

The tree mirrors HAST (the HTML syntax tree used by rehype): a root holding
elements, text, comments, doctypes and raw HTML. Each node kind is its own
dataclass and ``Node`` is their union, so code dispatches on the type instead
of probing attributes.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from markasset.exceptions import TreeError


@dataclass
class Root:
    children: list["Node"] = field(default_factory=list)


@dataclass
class Element:
    tag_name: str
    properties: dict[str, Any] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)


@dataclass
class Text:
    value: str


@dataclass
class Comment:
    value: str


@dataclass
class Raw:
    value: str


@dataclass
class Doctype:
    pass


Node = Root | Element | Text | Comment | Doctype | Raw

_LITERAL_TYPES: dict[str, type[Text | Comment | Raw]] = {
    "text": Text,
    "comment": Comment,
    "raw": Raw,
}


def is_image_element(node: Node) -> bool:
    """True for ``img`` elements with a non-empty string ``src``."""
    if not isinstance(node, Element) or node.tag_name != "img":
        return False
    src = node.properties.get("src")
    return isinstance(src, str) and bool(src)


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants, depth-first."""
    yield node
    if isinstance(node, (Root, Element)):
        for child in node.children:
            yield from walk(child)


def from_hast(data: Mapping[str, Any]) -> Node:
    """Build a tree from its HAST JSON form.

    Raises:
        TreeError: If a node has an unknown or missing type
    """
    node_type = data.get("type")
    if node_type == "root":
        return Root(children=[from_hast(child) for child in data.get("children", [])])
    if node_type == "element":
        tag_name = data.get("tagName")
        if not isinstance(tag_name, str):
            raise TreeError("Element node without a tagName", node_type=node_type)
        return Element(
            tag_name=tag_name,
            properties=dict(data.get("properties") or {}),
            children=[from_hast(child) for child in data.get("children", [])],
        )
    if node_type in _LITERAL_TYPES:
        return _LITERAL_TYPES[node_type](value=data.get("value", ""))
    if node_type == "doctype":
        return Doctype()
    raise TreeError(f"Unknown node type: {node_type!r}", node_type=node_type)


def to_hast(node: Node) -> dict[str, Any]:
    """Convert a tree back to its HAST JSON form."""
    if isinstance(node, Root):
        return {"type": "root", "children": [to_hast(child) for child in node.children]}
    if isinstance(node, Element):
        return {
            "type": "element",
            "tagName": node.tag_name,
            "properties": dict(node.properties),
            "children": [to_hast(child) for child in node.children],
        }
    if isinstance(node, Doctype):
        return {"type": "doctype"}
    for node_type, cls in _LITERAL_TYPES.items():
        if isinstance(node, cls):
            return {"type": node_type, "value": node.value}
    raise TreeError(f"Not a tree node: {type(node).__name__}")

