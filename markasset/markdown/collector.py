"""Collect candidate image references from markdown source."""

import re

_FENCED_CODE_PATTERN = re.compile(r"^(`{3,}|~{3,}).*?^\1\s*$", re.MULTILINE | re.DOTALL)
_INLINE_CODE_PATTERN = re.compile(r"`[^`\n]+`")
_MARKDOWN_IMAGE_PATTERN = re.compile(
    r"!\[[^\]]*\]\(\s*(?:<([^>\n]+)>|([^)\s]+))(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
_HTML_IMAGE_PATTERN = re.compile(r"<img\b[^>]*?\bsrc\s*=\s*([\"'])(.*?)\1", re.IGNORECASE)
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def is_local_reference(src: str) -> bool:
    """Check whether an image source points at a file relative to the project.

    URLs with a scheme (``https:``, ``data:`` ...), protocol-relative and
    root-absolute paths, and fragment-only references are not local.
    """
    if not src or src.startswith(("/", "#")):
        return False
    return not _SCHEME_PATTERN.match(src)


def collect_image_paths(markdown: str) -> set[str]:
    """Find local image references in markdown and inline ``<img>`` tags.

    Images inside code spans and fenced code blocks are ignored.

    Args:
        markdown: Markdown source

    Returns:
        Distinct ``src`` values exactly as written
    """
    text = _FENCED_CODE_PATTERN.sub("", markdown)
    text = _INLINE_CODE_PATTERN.sub("", text)

    found: set[str] = set()
    for match in _MARKDOWN_IMAGE_PATTERN.finditer(text):
        found.add((match.group(1) or match.group(2)).strip())
    for match in _HTML_IMAGE_PATTERN.finditer(text):
        found.add(match.group(2).strip())

    return {src for src in found if is_local_reference(src)}
