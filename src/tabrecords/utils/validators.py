"""
Validation utilities for stream arguments.

Provides the precondition checks used by DelimitedRecordStream.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from tabrecords.errors import InvalidArgumentError, NullInputError


def is_blank(value: Optional[str]) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def validate_path(path: Union[str, Path, None]) -> str:
    """
    Validate a file path argument.

    Args:
        path: Path supplied by the caller

    Returns:
        The path as a string

    Raises:
        InvalidArgumentError: If the path is missing or blank
    """
    if isinstance(path, Path):
        path = str(path)

    if not isinstance(path, str) or is_blank(path):
        raise InvalidArgumentError("Parameter path cannot be null or empty")

    return path


def validate_columns(columns: Optional[Sequence[str]]) -> List[str]:
    """
    Validate a record before it is written.

    Args:
        columns: Ordered sequence of column values

    Returns:
        The columns as a list

    Raises:
        NullInputError: If columns is None
        InvalidArgumentError: If the sequence is empty or holds a blank column
    """
    if columns is None:
        raise NullInputError("Parameter columns cannot be null")

    # A bare string is a sequence of characters, never a record
    if isinstance(columns, (str, bytes)):
        raise InvalidArgumentError("Parameter columns must be a sequence of strings, not a single string")

    columns = list(columns)
    if not columns:
        raise InvalidArgumentError("Parameter columns contains no items")

    for index, column in enumerate(columns):
        if not isinstance(column, str):
            raise InvalidArgumentError(
                f"Parameter columns contains a non-string item at index {index}: {type(column).__name__}"
            )
        if is_blank(column):
            raise InvalidArgumentError(f"Parameter columns contains an empty item at index {index}")

    return columns

