"""Content hashing for cache-busting asset names."""

import hashlib
from pathlib import Path

import anyio

from markasset.config.constants import DEFAULT_HASH_SIZE, HASH_ALGORITHM


async def read_image_source(path: Path) -> bytes:
    """Read the full contents of an image file."""
    return await anyio.Path(path).read_bytes()


def get_image_digest(source: bytes) -> str:
    """Full SHA-256 hex digest of ``source``."""
    return hashlib.new(HASH_ALGORITHM, source).hexdigest()


def get_image_hash(source: bytes, size: int = DEFAULT_HASH_SIZE) -> str:
    """Compute a short, stable content hash.

    Args:
        source: Raw file contents
        size: Number of hex characters to keep (negative values give "")

    Returns:
        Truncated SHA-256 hex digest
    """
    return get_image_digest(source)[: max(0, size)]
