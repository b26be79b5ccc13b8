"""Read image dimensions and format with Pillow."""

from dataclasses import dataclass
from pathlib import Path

import anyio
from PIL import Image, UnidentifiedImageError

from markasset.config.constants import EXIF_ORIENTATION_TAG, ROTATED_ORIENTATIONS
from markasset.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class ImageMetadata:
    """Intrinsic properties of a source image."""

    src: str
    width: int
    height: int
    format: str
    orientation: int | None = None


def _normalize_format(fmt: str | None) -> str:
    fmt = (fmt or "").lower()
    return "jpg" if fmt == "jpeg" else fmt


def _read_metadata(path: Path) -> ImageMetadata | None:
    try:
        with Image.open(path) as img:
            width, height = img.size
            fmt = _normalize_format(img.format)
            orientation = img.getexif().get(EXIF_ORIENTATION_TAG)
    except UnidentifiedImageError:
        log.debug("Not a recognized image", path=str(path))
        return None

    # Report dimensions as displayed, not as stored
    if orientation in ROTATED_ORIENTATIONS:
        width, height = height, width

    return ImageMetadata(
        src=str(path),
        width=width,
        height=height,
        format=fmt,
        orientation=orientation,
    )


async def image_metadata(path: Path) -> ImageMetadata | None:
    """Read metadata for an image file.

    Decoding runs in a worker thread so the event loop keeps serving other
    images.

    Args:
        path: Absolute path of the image

    Returns:
        Image metadata, or None if Pillow does not recognize the file
    """
    return await anyio.to_thread.run_sync(_read_metadata, path)
