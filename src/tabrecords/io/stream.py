"""
Sequential reader/writer for tab-separated records.

A DelimitedRecordStream is bound to one file in exactly one mode. In write
mode it appends tab-joined records; in read mode it parses one line per
call into two columns. Columns are never quoted or escaped, so a value
containing a tab or line break will not survive a round trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, NamedTuple, Optional, Sequence, TextIO, Tuple, Union

from tabrecords.core.config import StreamConfig
from tabrecords.errors import (
    InvalidArgumentError,
    InvalidStateError,
    RecordFileNotFoundError,
    RecordIOError,
)
from tabrecords.utils.logging import StreamLogger
from tabrecords.utils.validators import is_blank, validate_columns, validate_path


SEPARATOR = "\t"
LINE_TERMINATOR = "\n"  # translated to the platform line break by text mode

FIRST_COLUMN = 0
SECOND_COLUMN = 1


class StreamMode(Enum):
    """Access mode bound to a stream at open time."""
    READ = "read"
    WRITE = "write"

    @classmethod
    def coerce(cls, mode: Union["StreamMode", str]) -> "StreamMode":
        """
        Convert a mode argument to a StreamMode.

        Accepts a member or its exact string value. Anything else,
        including bit-flag style integers such as 3 (read and write combined),
        is rejected.

        Raises:
            InvalidArgumentError: If mode is not exactly READ or WRITE
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            for member in cls:
                if member.value == mode:
                    return member
        raise InvalidArgumentError(f"Unknown file mode: {mode!r}. Must be 'read' or 'write'")


class ReadResult(NamedTuple):
    """Outcome of one read() call. Columns are None when found is False."""
    found: bool
    column1: Optional[str] = None
    column2: Optional[str] = None


NO_MORE_ROWS = ReadResult(False, None, None)


@dataclass(frozen=True)
class _Unopened:
    pass


@dataclass(frozen=True)
class _OpenForRead:
    path: str
    handle: TextIO


@dataclass(frozen=True)
class _OpenForWrite:
    path: str
    handle: TextIO


_UNOPENED = _Unopened()


class DelimitedRecordStream:
    """
    Read or write tab-separated records, one file and one mode at a time.

    Example:
        >>> with DelimitedRecordStream().open("people.tsv", StreamMode.WRITE) as stream:
        ...     stream.write(["Shelby Macias", "3027 Lorem St.", "Kokomo"])
        >>> with DelimitedRecordStream().open("people.tsv", StreamMode.READ) as stream:
        ...     stream.read()
        ReadResult(found=True, column1='Shelby Macias', column2='3027 Lorem St.')
    """

    def __init__(self, config: Optional[StreamConfig] = None):
        """
        Initialize an unopened stream.

        Args:
            config: Encoding, newline and logging options
        """
        self.config = config or StreamConfig()
        self._state: Union[_Unopened, _OpenForRead, _OpenForWrite] = _UNOPENED
        self._log: Optional[StreamLogger] = None
        self.rows_written = 0
        self.rows_read = 0

    @property
    def is_open(self) -> bool:
        return not isinstance(self._state, _Unopened)

    @property
    def mode(self) -> Optional[StreamMode]:
        if isinstance(self._state, _OpenForRead):
            return StreamMode.READ
        if isinstance(self._state, _OpenForWrite):
            return StreamMode.WRITE
        return None

    @property
    def path(self) -> Optional[str]:
        return None if isinstance(self._state, _Unopened) else self._state.path

    def open(
        self,
        path: Union[str, Path],
        mode: Union[StreamMode, str]
    ) -> "DelimitedRecordStream":
        """
        Open a file for reading or writing.

        Opening for write creates or truncates the file immediately.

        Args:
            path: File to open
            mode: StreamMode.READ or StreamMode.WRITE

        Returns:
            This stream, so the call can be used in a with statement

        Raises:
            InvalidArgumentError: If path is blank or mode is not READ or WRITE
            InvalidStateError: If the stream is already open
            RecordFileNotFoundError: If a file opened for reading does not exist
            RecordIOError: If the file cannot be opened
        """
        path = validate_path(path)
        mode = StreamMode.coerce(mode)

        if self.is_open:
            raise InvalidStateError(
                f"Stream is already open for {self.mode.value} on {self.path}; close it first"
            )

        log = StreamLogger(path, mode.value, level=self.config.log_level)
        file_mode = "r" if mode is StreamMode.READ else "w"

        try:
            handle = open(
                path,
                file_mode,
                encoding=self.config.encoding,
                newline=self.config.newline,
            )
        except OSError as e:
            if mode is StreamMode.READ and isinstance(e, FileNotFoundError):
                raise RecordFileNotFoundError(f"File not found: {path}") from e
            raise RecordIOError(f"Cannot open {path} for {mode.value}: {e}") from e

        if mode is StreamMode.READ:
            self._state = _OpenForRead(path, handle)
        else:
            self._state = _OpenForWrite(path, handle)

        self._log = log
        self.rows_written = 0
        self.rows_read = 0
        log.info("Opened")
        return self

    def write(self, columns: Sequence[str]) -> None:
        """
        Append one record.

        Args:
            columns: Non-empty sequence of non-blank strings

        Raises:
            InvalidStateError: If the stream is not open for writing
            NullInputError: If columns is None
            InvalidArgumentError: If columns is empty, holds a blank value, or
                holds a value the configured encoding cannot represent
            RecordIOError: If the underlying write fails
        """
        handle = self._require(_OpenForWrite, "write").handle
        columns = validate_columns(columns)

        try:
            handle.write(SEPARATOR.join(columns) + LINE_TERMINATOR)
        except UnicodeEncodeError as e:
            raise InvalidArgumentError(
                f"Parameter columns cannot be encoded as {self.config.encoding}: {e}"
            ) from e
        except OSError as e:
            raise RecordIOError(f"Failed to write record to {self.path}: {e}") from e

        self.rows_written += 1
        self._log.debug(f"Wrote record with {len(columns)} columns")

    def read(self) -> ReadResult:
        """
        Read the next record's first two columns.

        End of file, a blank line, or a line with fewer than two
        columns all return NO_MORE_ROWS. Columns past the second are
        dropped.

        Raises:
            InvalidStateError: If the stream is not open for reading
            RecordIOError: If the input cannot be decoded with the configured encoding
        """
        handle = self._require(_OpenForRead, "read").handle

        try:
            line = handle.readline()
        except UnicodeDecodeError as e:
            raise RecordIOError(
                f"Cannot decode input from {self.path} as {self.config.encoding}: {e}"
            ) from e

        if is_blank(line):
            return NO_MORE_ROWS

        columns = line.rstrip("\r\n").split(SEPARATOR)
        if len(columns) < 2:
            self._log.debug(f"Short row with {len(columns)} column(s) ends the data")
            return NO_MORE_ROWS

        self.rows_read += 1
        return ReadResult(True, columns[FIRST_COLUMN], columns[SECOND_COLUMN])

    def flush(self) -> None:
        """Flush buffered records to disk."""
        self._require(_OpenForWrite, "flush").handle.flush()

    def close(self) -> None:
        """Release the open file, if any. Never raises."""
        state, self._state = self._state, _UNOPENED
        if isinstance(state, _Unopened):
            return

        try:
            state.handle.close()
        except OSError as e:
            self._log.error(f"Failed to close cleanly: {e}")
            return

        self._log.log_metrics({"rows_written": self.rows_written, "rows_read": self.rows_read})
        self._log.info("Closed")

    def _require(self, state_type, operation: str):
        state = self._state
        if not isinstance(state, state_type):
            if isinstance(state, _Unopened):
                raise InvalidStateError(f"Cannot {operation}: stream is not open")
            raise InvalidStateError(
                f"Cannot {operation}: stream is open for {self.mode.value} on {state.path}"
            )
        return state

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        while True:
            found, column1, column2 = self.read()
            if not found:
                return
            yield column1, column2

    def __enter__(self) -> "DelimitedRecordStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if not self.is_open:
            return "DelimitedRecordStream(unopened)"
        return f"DelimitedRecordStream(path={self.path!r}, mode={self.mode.value})"
