"""Asset resolution: paths, content hashes and output file names."""

from markasset.assets.hashing import get_image_digest, get_image_hash, read_image_source
from markasset.assets.naming import (
    AssetInfo,
    generate_asset_file_name,
    get_asset_file_names,
    get_image_asset_file_name,
    render_name_pattern,
    validate_name_pattern,
)
from markasset.assets.paths import image_path_for, resolve_image_path

__all__ = [
    "AssetInfo",
    "generate_asset_file_name",
    "get_asset_file_names",
    "get_image_asset_file_name",
    "get_image_digest",
    "get_image_hash",
    "image_path_for",
    "read_image_source",
    "render_name_pattern",
    "resolve_image_path",
    "validate_name_pattern",
]
