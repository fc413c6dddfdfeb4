"""
Whole-file writing built on DelimitedRecordStream.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from tabrecords.core.config import StreamConfig
from tabrecords.io.stream import DelimitedRecordStream, StreamMode
from tabrecords.utils.logging import get_logger


logger = get_logger(__name__)


def write_records(
    path: Union[str, Path],
    records: Iterable[Sequence[str]],
    config: Optional[StreamConfig] = None
) -> int:
    """
    Write records to a file, replacing its contents.

    The file is closed on every exit path. If a record is rejected,
    the records before it have already been written.

    Args:
        path: File to create or truncate
        records: Records to write, each a non-empty sequence of non-blank strings
        config: Optional stream options

    Returns:
        Number of records written

    Raises:
        NullInputError: If a record is None
        InvalidArgumentError: If a record is empty or holds a blank value
        RecordIOError: If the file cannot be opened or written
    """
    with DelimitedRecordStream(config).open(path, StreamMode.WRITE) as stream:
        for record in records:
            stream.write(record)
        count = stream.rows_written

    logger.debug(f"Wrote {count} records to: {path}")
    return count
