"""Custom exceptions for markasset."""

from pathlib import Path


class MarkassetError(Exception):
    """Base exception class for markasset."""

    pass


class ConfigurationError(MarkassetError):
    """Configuration error.

    Raised for problems that indicate a configuration bug rather than a data
    condition. These always abort the whole resolution pass.
    """

    pass


class MultipleOutputsError(ConfigurationError):
    """The build output configuration declares more than one output target."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Cannot pick an asset naming pattern from {count} output options; "
            "configure a single build output"
        )


class UnknownPlaceholderError(ConfigurationError):
    """An asset naming pattern contains a placeholder we cannot render."""

    def __init__(self, placeholder: str, pattern: str) -> None:
        self.placeholder = placeholder
        self.pattern = pattern
        super().__init__(f'Unknown placeholder "[{placeholder}]" in asset file name pattern "{pattern}"')


class ImageResolutionError(MarkassetError):
    """Error while resolving a single image."""

    def __init__(self, reference: str, message: str, cause: Exception | None = None) -> None:
        self.reference = reference
        self.cause = cause
        super().__init__(f"{message} (image {reference})")


class TreeError(MarkassetError):
    """Malformed document tree."""

    def __init__(self, message: str, node_type: str | None = None) -> None:
        self.node_type = node_type
        super().__init__(message)


class MetadataError(ImageResolutionError):
    """Image metadata could not be read."""

    def __init__(self, reference: str, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        super().__init__(reference, "Failed to get metadata for image", cause=cause)
