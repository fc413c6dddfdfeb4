"""
Unit tests for the validators and logging utilities.
"""

import logging
import pytest

from tabrecords.errors import InvalidArgumentError, NullInputError
from tabrecords.utils.logging import StreamLogger, get_logger
from tabrecords.utils.validators import (
    is_blank,
    validate_columns,
    validate_path,
)


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t", "\r\n", " \t \n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["a", " a ", "0", "\ta"])
    def test_non_blank_values(self, value):
        assert not is_blank(value)


class TestValidatePath:
    """Tests for validate_path."""

    def test_string_path(self):
        assert validate_path("out.tsv") == "out.tsv"

    def test_pathlib_path(self, tmp_path):
        """Test that Path objects are converted to strings."""
        assert validate_path(tmp_path / "out.tsv") == str(tmp_path / "out.tsv")

    @pytest.mark.parametrize("path", [None, "", "  ", 42])
    def test_invalid_paths(self, path):
        with pytest.raises(InvalidArgumentError):
            validate_path(path)


class TestValidateColumns:
    """Tests for validate_columns."""

    def test_returns_list(self):
        assert validate_columns(("a", "b")) == ["a", "b"]

    def test_none(self):
        with pytest.raises(NullInputError):
            validate_columns(None)

    def test_empty(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_columns([])
        assert "no items" in str(exc_info.value)

    def test_blank_item_index_reported(self):
        """Test that the offending index is named in the message."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_columns(["a", "b", ""])
        assert "index 2" in str(exc_info.value)

    def test_bytes_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_columns(b"ab")


class TestLogging:
    """Tests for logging helpers."""

    def test_get_logger_configures_once(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("tabrecords.tests.once")
        get_logger("tabrecords.tests.once")
        assert len(logger.handlers) == 1

    def test_stream_logger_prefix(self, caplog):
        """Test that messages carry the mode and path."""
        log = StreamLogger("data.tsv", "write", level=logging.DEBUG)

        log.info("Opened")

        assert "[write][data.tsv] Opened" in caplog.text

    def test_stream_logger_level_filters(self, caplog):
        """Test that messages below the stream's level are dropped."""
        log = StreamLogger("data.tsv", "read", level="WARNING")

        log.info("quiet")
        log.debug("quieter")
        log.warning("loud")

        assert "quiet" not in caplog.text
        assert "loud" in caplog.text

    def test_log_metrics(self, caplog):
        log = StreamLogger("data.tsv", "write", level=logging.INFO)

        log.log_metrics({"rows_written": 3, "rows_read": 0})

        assert "Metrics: rows_written=3, rows_read=0" in caplog.text
