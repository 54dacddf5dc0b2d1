"""Tests for logging configuration."""

import io
import logging
import sys

from localizer.logging_config import LOGGER_NAME, Utf8StreamHandler, logger, setup_logging


def _legacy_console() -> tuple[io.BytesIO, io.TextIOWrapper]:
    buffer = io.BytesIO()
    return buffer, io.TextIOWrapper(buffer, encoding="cp1252")


class TestUtf8StreamHandler:
    """Tests for Utf8StreamHandler."""

    def test_tree_characters_written_as_utf8(self) -> None:
        """Box-drawing characters survive a cp1252 console."""
        buffer, console = _legacy_console()
        handler = Utf8StreamHandler(console)
        handler.setFormatter(logging.Formatter("%(message)s"))

        record = logging.LogRecord(
            LOGGER_NAME, logging.INFO, __file__, 1, "├── Item 100", None, None
        )
        handler.emit(record)

        assert buffer.getvalue() == "├── Item 100\n".encode("utf-8")

    def test_close_keeps_wrapped_stream_open(self) -> None:
        """Closing the handler leaves the console usable."""
        _, console = _legacy_console()
        handler = Utf8StreamHandler(console)

        handler.close()

        assert not console.closed
        console.write("still open")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_logs_to_stderr_with_indentation(self, monkeypatch) -> None:
        """Nested messages are written to stderr with the tree prefix."""
        buffer, console = _legacy_console()
        monkeypatch.setattr(sys, "stderr", console)

        setup_logging(logging.DEBUG)
        with logger.indent_block("Item 100"):
            logger.debug("ids: {'en': 500, 'it': 501}")

        lines = buffer.getvalue().decode("utf-8").splitlines()
        assert lines == [
            "   DEBUG Item 100",
            "   DEBUG ├── ids: {'en': 500, 'it': 501}",
        ]

    def test_repeated_setup_replaces_handler(self, monkeypatch) -> None:
        """A second call installs one fresh handler and keeps stderr open."""
        _, console = _legacy_console()
        monkeypatch.setattr(sys, "stderr", console)

        setup_logging(logging.INFO)
        setup_logging(logging.WARNING)

        base_logger = logging.getLogger(LOGGER_NAME)
        assert len(base_logger.handlers) == 1
        assert base_logger.level == logging.WARNING
        assert not console.closed
