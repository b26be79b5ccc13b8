"""Map document-relative image references to files on disk."""

import os
from pathlib import Path

import anyio

from markasset.config.constants import ALIAS_PREFIX, ALIAS_TARGET


def image_path_for(reference: str, document_path: str | Path, root_path: str | Path) -> Path:
    """Compute the absolute path an image reference points to.

    References under the ``~/assets/`` alias live in ``<root_path>/src/assets``;
    anything else is relative to the directory holding the document. The result
    is normalized but symlinks are not followed.

    Args:
        reference: The ``src`` value exactly as written in the document
        document_path: Path of the document containing the reference
        root_path: Project root

    Returns:
        Absolute path of the referenced file
    """
    if reference.startswith(ALIAS_PREFIX):
        base = os.path.join(root_path, *ALIAS_TARGET)
        relative = reference[len(ALIAS_PREFIX) :]
    else:
        base = os.path.dirname(os.path.abspath(document_path))
        relative = reference
    return Path(os.path.abspath(os.path.join(base, relative)))


async def resolve_image_path(
    reference: str, document_path: str | Path, root_path: str | Path
) -> Path | None:
    """Resolve an image reference, or return None if the file does not exist."""
    path = image_path_for(reference, document_path, root_path)
    if not await anyio.Path(path).exists():
        return None
    return path
