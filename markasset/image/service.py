"""Boundary to the image optimization service.

The resolver never optimizes images itself. It hands an :class:`ImageTransform`
to whatever :class:`ImageService` it was given and uses the ``src`` of the
result.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Protocol

from markasset.config.constants import DEFAULT_IMAGE_BASE
from markasset.image.metadata import ImageMetadata


@dataclass
class ImageTransform:
    """Request for a (possibly transformed) image."""

    src: ImageMetadata | str
    width: int | None = None
    height: int | None = None
    quality: int | str | None = None
    format: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class GetImageResult:
    """What the image service returns for a transform request."""

    raw_options: ImageTransform
    options: ImageTransform
    src: str
    attributes: dict[str, Any] = field(default_factory=dict)


class ImageService(Protocol):
    """Protocol for image optimization services."""

    async def get_image(self, options: ImageTransform) -> GetImageResult:
        """Produce the final image for a transform request.

        Args:
            options: Source metadata (with ``src`` set to the output asset
                file name) and requested transformations

        Returns:
            Result whose ``src`` replaces the reference in the document
        """
        ...


class StaticImageService:
    """Image service that serves assets under their content-addressed name.

    No transcoding happens; the asset file name is published below ``base``.
    """

    def __init__(self, base: str = DEFAULT_IMAGE_BASE) -> None:
        self.base = base

    async def get_image(self, options: ImageTransform) -> GetImageResult:
        source = options.src
        asset_path = source.src if isinstance(source, ImageMetadata) else source
        src = f"{self.base.rstrip('/')}/{asset_path.lstrip('/')}" if self.base else asset_path

        resolved = replace(options)
        if isinstance(source, ImageMetadata):
            resolved.width = options.width or source.width
            resolved.height = options.height or source.height
            resolved.format = options.format or source.format

        attributes: dict[str, Any] = {}
        if resolved.width:
            attributes["width"] = resolved.width
        if resolved.height:
            attributes["height"] = resolved.height

        return GetImageResult(raw_options=options, options=resolved, src=src, attributes=attributes)
