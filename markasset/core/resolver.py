"""Resolve a document's image references to content-addressed asset sources."""

import asyncio
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from markasset.assets.hashing import get_image_digest, read_image_source
from markasset.assets.naming import (
    NamingPattern,
    generate_asset_file_name,
    get_asset_file_names,
    validate_name_pattern,
)
from markasset.assets.paths import resolve_image_path
from markasset.config.settings import MarkassetSettings
from markasset.exceptions import ConfigurationError, MetadataError
from markasset.image.metadata import image_metadata
from markasset.image.service import ImageService, ImageTransform, StaticImageService
from markasset.utils.concurrency import Fulfilled, settle_all
from markasset.utils.logging import get_logger

log = get_logger(__name__)


async def _group_by_path(
    references: Iterable[str], document_path: str | Path, root_path: Path
) -> dict[Path, list[str]]:
    """Map each existing file to the references that point at it."""
    ordered = sorted(references)
    paths = await asyncio.gather(
        *(resolve_image_path(reference, document_path, root_path) for reference in ordered)
    )

    by_path: dict[Path, list[str]] = {}
    for reference, path in zip(ordered, paths, strict=True):
        if path is None:
            log.debug("Skipping unresolvable image", reference=reference)
            continue
        by_path.setdefault(path, []).append(reference)
    return by_path


async def _resolve_asset(
    path: Path,
    reference: str,
    asset_file_names: NamingPattern,
    hash_size: int,
    service: ImageService,
) -> str:
    """Run one image through metadata, hashing, naming and the image service."""
    try:
        meta = await image_metadata(path)
    except OSError as e:
        raise MetadataError(reference, path, cause=e) from e
    if meta is None:
        raise MetadataError(reference, path)

    source = await read_image_source(path)
    asset_path = generate_asset_file_name(
        path.name,
        source,
        get_image_digest(source),
        asset_file_names,
        default_hash_size=hash_size,
    )
    image = await service.get_image(ImageTransform(src=replace(meta, src=asset_path)))
    log.debug("Resolved image", reference=reference, asset=asset_path, src=image.src)
    return image.src


async def resolve_images(
    references: Iterable[str],
    document_path: str | Path,
    settings: MarkassetSettings,
    service: ImageService,
) -> dict[str, str]:
    """Resolve image references found in one document.

    Each distinct file is processed exactly once, concurrently with the
    others. Missing files are skipped silently and per-image failures are
    logged and left out of the result; only configuration errors propagate.

    Args:
        references: Candidate ``src`` values from the document
        document_path: Path of the document the references appear in
        settings: Resolution settings
        service: Image service producing the final sources

    Returns:
        Mapping of reference -> final src for every image that resolved

    Raises:
        ConfigurationError: If the asset naming configuration is invalid
    """
    references = set(references)
    if not references:
        return {}

    asset_file_names = get_asset_file_names(settings.build_output)
    validate_name_pattern(asset_file_names)

    by_path = await _group_by_path(references, document_path, settings.root_path)
    if not by_path:
        return {}

    async def resolve_path(path: Path) -> str:
        return await _resolve_asset(
            path,
            by_path[path][0],
            asset_file_names,
            settings.image.hash_size,
            service,
        )

    outcomes = await settle_all(
        by_path, resolve_path, max_workers=settings.concurrency.image_workers
    )

    resolved: dict[str, str] = {}
    for outcome in outcomes:
        if isinstance(outcome, Fulfilled):
            for reference in by_path[outcome.item]:
                resolved[reference] = outcome.value
        elif isinstance(outcome.reason, ConfigurationError):
            raise outcome.reason
        else:
            log.warning(
                "Failed to resolve image",
                reference=by_path[outcome.item][0],
                path=str(outcome.item),
                error=str(outcome.reason),
            )

    log.debug(
        "Resolved document images",
        document=str(document_path),
        requested=len(references),
        resolved=len(resolved),
    )
    return resolved


class ImageResolutionCoordinator:
    """Resolves image references with fixed settings and image service."""

    def __init__(self, settings: MarkassetSettings, service: ImageService | None = None) -> None:
        """Initialize the coordinator.

        Args:
            settings: Resolution settings
            service: Image service; defaults to a StaticImageService using
                ``settings.image.base``
        """
        self.settings = settings
        self.service = service or StaticImageService(settings.image.base)

    async def resolve_all(self, references: Iterable[str], document_path: str | Path) -> dict[str, str]:
        """Resolve references for one document. See :func:`resolve_images`."""
        return await resolve_images(references, document_path, self.settings, self.service)
