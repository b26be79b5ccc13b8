"""Tests for exceptions module."""

from pathlib import Path

from markasset.exceptions import (
    ConfigurationError,
    ImageResolutionError,
    MarkassetError,
    MetadataError,
    MultipleOutputsError,
    TreeError,
    UnknownPlaceholderError,
)


class TestExceptions:
    """Tests for custom exceptions."""

    def test_markasset_error(self):
        """Test base MarkassetError."""
        error = MarkassetError("Test error")
        assert str(error) == "Test error"

    def test_multiple_outputs_error(self):
        """MultipleOutputsError is a configuration error."""
        error = MultipleOutputsError(3)

        assert isinstance(error, ConfigurationError)
        assert error.count == 3
        assert "3 output options" in str(error)

    def test_unknown_placeholder_error(self):
        """UnknownPlaceholderError names the placeholder and pattern."""
        error = UnknownPlaceholderError("id", "assets/[id]")

        assert isinstance(error, ConfigurationError)
        assert error.placeholder == "id"
        assert "[id]" in str(error)
        assert "assets/[id]" in str(error)

    def test_image_resolution_error(self):
        """ImageResolutionError keeps reference and cause."""
        cause = OSError("denied")
        error = ImageResolutionError("./a.png", "Failed", cause=cause)

        assert error.reference == "./a.png"
        assert error.cause is cause
        assert "./a.png" in str(error)
        assert not isinstance(error, ConfigurationError)

    def test_metadata_error(self):
        """MetadataError is an ImageResolutionError."""
        error = MetadataError("./a.png", Path("/proj/a.png"))

        assert isinstance(error, ImageResolutionError)
        assert error.path == Path("/proj/a.png")
        assert "Failed to get metadata for image" in str(error)

    def test_tree_error(self):
        """TreeError records the node type."""
        error = TreeError("bad node", node_type="unknown")

        assert isinstance(error, MarkassetError)
        assert error.node_type == "unknown"
