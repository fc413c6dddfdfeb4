"""
Error types raised by record streams.

Every error derives from RecordStreamError and also from the built-in
exception callers would naturally expect (ValueError, TypeError, ...).
"""

from __future__ import annotations


class RecordStreamError(Exception):
    """Base class for record stream failures."""
    pass


class InvalidArgumentError(RecordStreamError, ValueError):
    """Raised for a bad path, bad mode, or empty/blank columns."""
    pass


class NullInputError(RecordStreamError, TypeError):
    """Raised when a required sequence is missing (None) rather than empty."""
    pass


class InvalidStateError(RecordStreamError, RuntimeError):
    """Raised when an operation does not match the stream's open mode."""
    pass


class RecordIOError(RecordStreamError, OSError):
    """Raised when the underlying file cannot be opened."""
    pass


class RecordFileNotFoundError(RecordIOError, FileNotFoundError):
    """Raised when a file opened for reading does not exist."""
    pass
