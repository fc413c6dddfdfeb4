"""Sequential reading and writing of tab-separated records."""

from tabrecords.io.stream import DelimitedRecordStream, ReadResult, StreamMode
from tabrecords.io.reader import read_column_pairs
from tabrecords.io.writer import write_records

__all__ = [
    "DelimitedRecordStream",
    "ReadResult",
    "StreamMode",
    "read_column_pairs",
    "write_records",
]
