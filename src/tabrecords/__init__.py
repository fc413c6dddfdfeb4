"""
Tabrecords - tab-separated record streams

Reads and writes line-oriented, tab-delimited text files one record
at a time, with typed errors for every precondition failure.
"""

from tabrecords._version import __version__, __version_info__, __environment__

from tabrecords.core.config import ConfigurationError, StreamConfig

from tabrecords.errors import (
    RecordStreamError,
    InvalidArgumentError,
    NullInputError,
    InvalidStateError,
    RecordIOError,
    RecordFileNotFoundError,
)

from tabrecords.io.stream import DelimitedRecordStream, ReadResult, StreamMode
from tabrecords.io.reader import read_column_pairs
from tabrecords.io.writer import write_records

from tabrecords.utils.logging import get_logger

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    "__environment__",
    # Core
    "ConfigurationError",
    "StreamConfig",
    # Errors
    "RecordStreamError",
    "InvalidArgumentError",
    "NullInputError",
    "InvalidStateError",
    "RecordIOError",
    "RecordFileNotFoundError",
    # I/O
    "DelimitedRecordStream",
    "ReadResult",
    "StreamMode",
    "read_column_pairs",
    "write_records",
    # Utils
    "get_logger",
]
