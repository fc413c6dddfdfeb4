"""
Whole-file reading built on DelimitedRecordStream.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

from tabrecords.core.config import StreamConfig
from tabrecords.io.stream import DelimitedRecordStream, StreamMode
from tabrecords.utils.logging import get_logger


logger = get_logger(__name__)


def read_column_pairs(
    path: Union[str, Path],
    config: Optional[StreamConfig] = None
) -> List[Tuple[str, str]]:
    """
    Read the first two columns of every record in a file.

    Reading stops at end of file, at the first blank line, or at the
    first row with fewer than two columns.

    Args:
        path: File to read
        config: Optional stream options

    Returns:
        List of (column1, column2) pairs in file order

    Raises:
        RecordFileNotFoundError: If the file does not exist
        RecordIOError: If the file cannot be opened
    """
    with DelimitedRecordStream(config).open(path, StreamMode.READ) as stream:
        pairs = list(stream)

    logger.debug(f"Read {len(pairs)} column pairs from: {path}")
    return pairs
