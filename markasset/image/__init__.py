"""Image metadata and the image service boundary."""

from markasset.image.metadata import ImageMetadata, image_metadata
from markasset.image.service import GetImageResult, ImageService, ImageTransform, StaticImageService

__all__ = [
    "GetImageResult",
    "ImageMetadata",
    "ImageService",
    "ImageTransform",
    "StaticImageService",
    "image_metadata",
]
