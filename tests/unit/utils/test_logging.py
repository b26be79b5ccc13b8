"""Tests for logging utilities module."""

import io
import json
import logging

import pytest

from markasset.utils.logging import (
    SafeStreamHandler,
    _add_separator,
    _filter_event_dict,
    get_logger,
    set_log_output,
    setup_logging,
)


@pytest.fixture
def log_stream():
    """Capture console log output."""
    stream = io.StringIO()
    set_log_output(stream)
    yield stream
    set_log_output(io.StringIO())
    logging.getLogger().handlers.clear()


class TestProcessors:
    """Tests for structlog processors."""

    def test_filter_long_string(self):
        """Long strings are truncated."""
        event = _filter_event_dict(None, "info", {"event": "x", "data": "a" * 1000})
        assert event["data"].startswith("a" * 500)
        assert "[1000 chars total]" in event["data"]

    def test_filter_bytes(self):
        """Binary values are summarized."""
        event = _filter_event_dict(None, "info", {"event": "x", "source": b"\x89PNG"})
        assert event["source"] == "[BINARY DATA: 4 bytes]"

    def test_short_values_unchanged(self):
        """Short values pass through."""
        event = _filter_event_dict(None, "info", {"event": "x", "reference": "./a.png"})
        assert event["reference"] == "./a.png"

    def test_separator_with_context(self):
        """A separator is added when context keys exist."""
        event = _add_separator(None, "info", {"event": "Resolved", "reference": "a"})
        assert event["event"] == "Resolved |"

    def test_no_separator_without_context(self):
        """Bare events are left alone."""
        event = _add_separator(None, "info", {"event": "Resolved", "level": "info"})
        assert event["event"] == "Resolved"


class TestSafeStreamHandler:
    """Tests for SafeStreamHandler."""

    def test_replaces_unencodable_characters(self):
        """Characters the stream cannot encode are replaced."""
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii")
        handler = SafeStreamHandler(stream)
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "图片 a.png", None, None)

        handler.emit(record)
        stream.flush()

        assert raw.getvalue().decode("ascii").strip() == "?? a.png"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_console_output(self, log_stream):
        """Events reach the console handler."""
        setup_logging(level="INFO")

        get_logger("test").warning("Failed to resolve image", reference="./a.png")

        output = log_stream.getvalue()
        assert "Failed to resolve image" in output
        assert "./a.png" in output

    def test_level_filters(self, log_stream):
        """Events below the level are dropped."""
        setup_logging(level="WARNING")

        get_logger("test").info("Resolved image")

        assert "Resolved image" not in log_stream.getvalue()

    def test_json_format(self, log_stream):
        """JSON output is one object per line."""
        setup_logging(level="INFO", json_format=True)

        get_logger("test").warning("Failed to resolve image", reference="./a.png")

        line = log_stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "Failed to resolve image"
        assert payload["reference"] == "./a.png"

    def test_log_file(self, log_stream, tmp_path):
        """A log file receives events too."""
        log_file = tmp_path / "logs" / "markasset.log"
        setup_logging(level="INFO", log_file=str(log_file))

        get_logger("test").warning("Written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Written to file" in log_file.read_text(encoding="utf-8")
