"""
Logging utilities for consistent logging across the library.

Provides a configured logger and a stream-aware wrapper that tags
every message with the file path and open mode.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


# Default format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Logging level
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if no handlers exist
    if not logger.handlers:
        logger.setLevel(level)

        # Create console handler
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        # Create formatter
        formatter = logging.Formatter(
            format_string or LOG_FORMAT,
            datefmt=DATE_FORMAT
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger


class StreamLogger:
    """
    Context-aware logger for a single record stream.

    Prefixes messages with the stream's mode and path so that
    interleaved output from several files stays readable.
    """

    def __init__(
        self,
        path: str,
        mode: str,
        level: Union[int, str] = logging.WARNING
    ):
        """
        Initialize stream logger.

        Args:
            path: File the stream is bound to
            mode: Open mode name (read, write)
            level: Logging level for the underlying logger
        """
        self.path = path
        self.mode = mode
        self.level = logging.getLevelName(level) if isinstance(level, str) else level
        # Shared logger stays at DEBUG; each stream filters by its own level
        self._logger = get_logger("tabrecords.stream", level=logging.DEBUG)

    def _format_message(self, message: str) -> str:
        """Format message with stream context."""
        return f"[{self.mode}][{self.path}] {message}"

    def _log(self, level: int, message: str, **kwargs) -> None:
        if level >= self.level:
            self._logger.log(level, self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def log_metrics(self, metrics: dict) -> None:
        """Log stream counters."""
        metrics_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
        self.info(f"Metrics: {metrics_str}")
