"""Core image resolution."""

from markasset.core.resolver import ImageResolutionCoordinator, resolve_images

__all__ = ["ImageResolutionCoordinator", "resolve_images"]
