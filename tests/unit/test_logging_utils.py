#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for CLI logging setup."""

import io
import logging
from pathlib import Path

import pytest

from notedoc.exceptions import ConfigError
from notedoc.logging_utils import configure_logging, resolve_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger's handlers and level back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestResolveLogLevel:
    """Test picking the effective level."""

    def test_first_set_candidate_wins(self) -> None:
        """Unset candidates are skipped."""
        assert resolve_log_level(None, "", "error", "debug") == logging.ERROR

    def test_default_is_warning(self) -> None:
        """Without candidates the level is WARNING."""
        assert resolve_log_level() == logging.WARNING
        assert resolve_log_level(None) == logging.WARNING

    def test_trace_forces_debug(self) -> None:
        """Trace mode overrides every candidate."""
        assert resolve_log_level("CRITICAL", trace_mode=True) == logging.DEBUG

    def test_numeric_level(self) -> None:
        """Numbers are used as they are."""
        assert resolve_log_level(15) == 15

    @pytest.mark.parametrize("name", ["verbose", "TRACE", "warn ing"])
    def test_unknown_name(self, name: str) -> None:
        """Unknown names raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            resolve_log_level(name)
        assert "WARNING" in str(exc_info.value)


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler installation."""

    def test_plain_format(self) -> None:
        """Console records show the level and message."""
        stream = io.StringIO()
        configure_logging("info", stream=stream)
        logging.getLogger("notedoc.test").info("converted %d blocks", 3)
        assert stream.getvalue() == "INFO: converted 3 blocks\n"

    def test_level_filters_records(self) -> None:
        """Records below the level are not written."""
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        logging.getLogger("notedoc.test").info("hidden")
        assert stream.getvalue() == ""

    def test_trace_format(self) -> None:
        """Trace mode adds the logger name and logs debug records."""
        stream = io.StringIO()
        configure_logging("ERROR", trace_mode=True, stream=stream)
        logging.getLogger("notedoc.parsers").debug("scan")
        assert "[DEBUG] [notedoc.parsers] scan" in stream.getvalue()

    def test_handlers_replaced(self) -> None:
        """Configuring twice leaves one console handler."""
        configure_logging("INFO", stream=io.StringIO())
        root = configure_logging("INFO", stream=io.StringIO())
        assert len(root.handlers) == 1

    def test_log_file(self, tmp_path: Path) -> None:
        """Records are also appended to the log file."""
        log_file = tmp_path / "notedoc.log"
        configure_logging("INFO", log_file=str(log_file), stream=io.StringIO())
        logging.getLogger("notedoc.test").warning("saved")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "WARNING: saved" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path: Path) -> None:
        """A log file that cannot be opened is reported, not raised."""
        stream = io.StringIO()
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)
        assert "Could not open log file" in stream.getvalue()

    def test_unknown_level(self) -> None:
        """Unknown level names raise before any handler changes."""
        with pytest.raises(ConfigError):
            configure_logging("loud", stream=io.StringIO())
