"""Asset file name generation compatible with Rollup's ``assetFileNames``.

A naming pattern is either a template such as ``assets/[name]-[hash][extname]``
or a callable that receives an :class:`AssetInfo` and returns such a template
(or a plain file name). Supported placeholders:

- ``[name]``: file name without extension
- ``[ext]``: extension without the leading dot
- ``[extname]``: extension with the leading dot
- ``[hash]`` / ``[hash:N]``: content hash, truncated to N characters

Any other placeholder is a configuration error.
"""

import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from markasset.assets.hashing import get_image_digest
from markasset.config.constants import ASSET_TYPE, DEFAULT_ASSET_FILE_NAMES, DEFAULT_HASH_SIZE
from markasset.config.settings import OutputOptions
from markasset.exceptions import ConfigurationError, MultipleOutputsError, UnknownPlaceholderError

_PLACEHOLDER_PATTERN = re.compile(r"\[(\w+)(:\d+)?\]")
_PLACEHOLDERS = frozenset({"name", "ext", "extname", "hash"})

Replacement = Callable[[int | None], str]


@dataclass(frozen=True)
class AssetInfo:
    """What a naming callback gets to see about an asset."""

    name: str
    source: bytes
    type: Literal["asset"] = ASSET_TYPE


NamingPattern = str | Callable[[AssetInfo], str]


def render_name_pattern(pattern: str, replacements: Mapping[str, Replacement]) -> str:
    """Expand every ``[placeholder]`` / ``[placeholder:N]`` token in a pattern.

    Args:
        pattern: Template string
        replacements: Placeholder name -> function of the optional size

    Returns:
        The rendered string

    Raises:
        UnknownPlaceholderError: If the pattern uses a placeholder not in replacements
    """

    def replace(match: re.Match[str]) -> str:
        placeholder, size = match.group(1), match.group(2)
        if placeholder not in replacements:
            raise UnknownPlaceholderError(placeholder, pattern)
        return replacements[placeholder](int(size[1:]) if size else None)

    return _PLACEHOLDER_PATTERN.sub(replace, pattern)


def validate_name_pattern(pattern: NamingPattern) -> None:
    """Fail early on template placeholders that could never render."""
    if callable(pattern):
        return
    for match in _PLACEHOLDER_PATTERN.finditer(pattern):
        if match.group(1) not in _PLACEHOLDERS:
            raise UnknownPlaceholderError(match.group(1), pattern)


def generate_asset_file_name(
    name: str,
    source: bytes,
    source_hash: str,
    asset_file_names: NamingPattern,
    default_hash_size: int = DEFAULT_HASH_SIZE,
) -> str:
    """Render the output file name for one asset.

    Args:
        name: Base file name of the source image (e.g. ``photo.png``)
        source: Raw file contents
        source_hash: Content hash of ``source``; ``[hash:N]`` can yield at
            most ``len(source_hash)`` characters, so pass the full digest
        asset_file_names: Template or naming callback
        default_hash_size: Hash length used by ``[hash]`` without a size

    Returns:
        Output file name, relative to the build output directory
    """
    if callable(asset_file_names):
        pattern = asset_file_names(AssetInfo(name=name, source=source))
        if not isinstance(pattern, str):
            raise ConfigurationError(
                f"Asset file name callback must return a string, got {type(pattern).__name__}"
            )
    else:
        pattern = asset_file_names

    stem, extname = os.path.splitext(name)

    return render_name_pattern(
        pattern,
        {
            "ext": lambda _size: extname[1:],
            "extname": lambda _size: extname,
            "hash": lambda size: source_hash[: max(0, size or default_hash_size)],
            "name": lambda _size: stem,
        },
    )


def get_asset_file_names(output: OutputOptions | list[OutputOptions] | None) -> NamingPattern:
    """Pick the naming pattern from the build output configuration.

    Raises:
        MultipleOutputsError: If the configuration lists several outputs
    """
    if isinstance(output, list):
        raise MultipleOutputsError(len(output))
    if output is None or not output.asset_file_names:
        return DEFAULT_ASSET_FILE_NAMES
    return output.asset_file_names


def get_image_asset_file_name(
    path: Path,
    source: bytes,
    output: OutputOptions | list[OutputOptions] | None = None,
    hash_size: int = DEFAULT_HASH_SIZE,
) -> str:
    """Content-addressed output file name for an image on disk."""
    asset_file_names = get_asset_file_names(output)
    return generate_asset_file_name(
        path.name,
        source,
        get_image_digest(source),
        asset_file_names,
        default_hash_size=hash_size,
    )
