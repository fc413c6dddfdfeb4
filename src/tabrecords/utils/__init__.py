"""Utility functions and helpers."""

from tabrecords.utils.logging import get_logger, StreamLogger
from tabrecords.utils.validators import validate_columns, validate_path

__all__ = [
    "get_logger",
    "StreamLogger",
    "validate_columns",
    "validate_path",
]
