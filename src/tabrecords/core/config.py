"""
Options for record streams.

StreamConfig is passed to the DelimitedRecordStream constructor. It only
covers how text is encoded and logged; the file path is always supplied
to open() by the caller.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Optional


VALID_NEWLINES = (None, "", "\n", "\r", "\r\n")


class ConfigurationError(Exception):
    """Raised when stream options are invalid."""
    pass


@dataclass
class StreamConfig:
    """Text encoding and logging options for a record stream."""
    encoding: str = "utf-8"
    newline: Optional[str] = None  # None writes os.linesep
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.encoding or not str(self.encoding).strip():
            raise ConfigurationError("Stream encoding is required")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {self.encoding}") from e
        if self.newline not in VALID_NEWLINES:
            raise ConfigurationError(
                f"Invalid newline: {self.newline!r}. Must be one of {VALID_NEWLINES}"
            )
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")
