"""Markdown document trees and image source rewriting."""

from markasset.markdown.collector import collect_image_paths, is_local_reference
from markasset.markdown.rewriter import RehypeAssetImages, VFile, absolutize, rewrite_images
from markasset.markdown.tree import (
    Comment,
    Doctype,
    Element,
    Node,
    Raw,
    Root,
    Text,
    from_hast,
    is_image_element,
    to_hast,
    walk,
)

__all__ = [
    "Comment",
    "Doctype",
    "Element",
    "Node",
    "Raw",
    "RehypeAssetImages",
    "Root",
    "Text",
    "VFile",
    "absolutize",
    "collect_image_paths",
    "from_hast",
    "is_image_element",
    "is_local_reference",
    "rewrite_images",
    "to_hast",
    "walk",
]
