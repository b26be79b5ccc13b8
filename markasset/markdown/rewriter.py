"""Rewrite image sources in a document tree to resolved asset paths."""

from collections.abc import Set
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from markasset.config.constants import IMAGE_PATHS_KEY
from markasset.config.settings import MarkassetSettings
from markasset.core.resolver import ImageResolutionCoordinator
from markasset.image.service import ImageService
from markasset.markdown.tree import Element, Node, is_image_element, walk
from markasset.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class VFile:
    """A document being processed: its path plus data attached by earlier phases."""

    path: str | Path | None = None
    data: dict[str, Any] = field(default_factory=dict)


def absolutize(path: str) -> str:
    """Normalize a resolved source when no root URL is configured.

    Sources starting with ``/`` get another ``/`` prefixed; everything else
    is returned as is.
    """
    # TODO: "/x.png" becomes the protocol-relative "//x.png"; decide whether only
    # paths that are not already absolute should get the prefix.
    return f"/{path}" if path.startswith("/") else path


def final_src(resolved: str, root_url: str | None) -> str:
    """Turn a resolved asset source into the value written to the document."""
    if root_url:
        return urljoin(root_url, resolved)
    return absolutize(resolved)


def find_image_nodes(tree: Node, image_paths: Set[str]) -> list[Element]:
    """Image elements whose ``src`` is one of the candidate references."""
    return [
        node
        for node in walk(tree)
        if is_image_element(node) and node.properties["src"] in image_paths
    ]


async def rewrite_images(
    tree: Node,
    image_paths: Set[str] | None,
    document_path: str | Path | None,
    settings: MarkassetSettings,
    service: ImageService | None = None,
) -> Node:
    """Point image elements at their content-addressed assets.

    The tree is modified in place. Images that cannot be resolved keep their
    original ``src``.

    Args:
        tree: Document tree
        image_paths: Candidate references collected from the document source;
            None or empty means there is nothing to do
        document_path: Path of the document the tree was parsed from
        settings: Resolution settings
        service: Image service; defaults to a StaticImageService

    Returns:
        The same tree
    """
    if not document_path or not image_paths:
        return tree

    image_nodes = find_image_nodes(tree, image_paths)
    if not image_nodes:
        return tree

    coordinator = ImageResolutionCoordinator(settings, service)
    resolved = await coordinator.resolve_all(
        {node.properties["src"] for node in image_nodes}, document_path
    )

    rewritten = 0
    for node in image_nodes:
        src = resolved.get(node.properties["src"])
        if src:
            node.properties["src"] = final_src(src, settings.root_url)
            rewritten += 1

    log.debug("Rewrote image sources", document=str(document_path), images=rewritten)
    return tree


class RehypeAssetImages:
    """Tree transformer in the shape of a rehype plugin.

    Reads candidate references from ``file.data["image_paths"]``; documents
    without that set are passed through untouched.
    """

    def __init__(self, settings: MarkassetSettings, service: ImageService | None = None) -> None:
        self.settings = settings
        self.service = service

    async def __call__(self, tree: Node, file: VFile) -> Node:
        image_paths = file.data.get(IMAGE_PATHS_KEY)
        if not isinstance(image_paths, Set):
            return tree
        return await rewrite_images(tree, image_paths, file.path, self.settings, self.service)
