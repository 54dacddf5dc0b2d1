"""
Logging configuration for the localizer

Per-item detail lines are nested under the item being processed.
"""

import io
import logging
import sys
from contextlib import contextmanager

LOGGER_NAME = "localizer"


class Utf8StreamHandler(logging.StreamHandler):
    """Stream handler that writes UTF-8 to the binary buffer of a text stream

    Keeps the tree characters intact on consoles with a legacy encoding
    (cp1252 on Windows). Closing the handler detaches the wrapper, so the
    wrapped stream stays open.
    """

    def __init__(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stderr
        super().__init__(
            io.TextIOWrapper(
                stream.buffer, encoding="utf-8", errors="replace", line_buffering=True
            )
        )

    def close(self) -> None:
        self.acquire()
        try:
            if self.stream is not None:
                if not self.stream.buffer.closed:
                    self.stream.detach()
                self.stream = None
        finally:
            self.release()
        super().close()


class IndentLogger:
    """Logger wrapper that prefixes messages with the current nesting depth"""

    _branch = "├── "
    _pipe = "│   "

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger
        self._level = 0

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        if self._level == 0:
            return ""
        return self._pipe * (self._level - 1) + self._branch

    def reset(self) -> None:
        """Reset indentation state (useful for tests)"""
        self._level = 0

    @contextmanager
    def indent_block(self, initial_message: str | None = None):
        """
        Context manager for nesting log lines

        Args:
            initial_message: Optional debug message to log at block start
        """
        if initial_message:
            self.debug(initial_message)
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1


def setup_logging(level=logging.INFO):
    """
    Configure logging for the localizer

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)
    for old_handler in base_logger.handlers:
        old_handler.close()
    base_logger.handlers = []

    handler = Utf8StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return logger


# Default logger with indentation support
logger = IndentLogger(logging.getLogger(LOGGER_NAME))
