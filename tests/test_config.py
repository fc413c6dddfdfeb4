"""
Unit tests for the configuration module.
"""

import pytest

from tabrecords.core.config import ConfigurationError, StreamConfig


class TestStreamConfig:
    """Tests for StreamConfig dataclass."""

    def test_default_values(self):
        """Test default values for optional fields."""
        config = StreamConfig()
        assert config.encoding == "utf-8"
        assert config.newline is None
        assert config.log_level == "WARNING"

    def test_log_level_normalized(self):
        """Test that log level names are upper-cased."""
        assert StreamConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that an unknown log level raises error."""
        with pytest.raises(ConfigurationError) as exc_info:
            StreamConfig(log_level="chatty")
        assert "Invalid log_level" in str(exc_info.value)

    def test_invalid_newline(self):
        """Test that an unsupported newline raises error."""
        with pytest.raises(ConfigurationError) as exc_info:
            StreamConfig(newline="\t")
        assert "Invalid newline" in str(exc_info.value)

    def test_missing_encoding(self):
        """Test that a blank encoding raises error."""
        with pytest.raises(ConfigurationError) as exc_info:
            StreamConfig(encoding="")
        assert "encoding is required" in str(exc_info.value)

    def test_unknown_encoding(self):
        """Test that an encoding Python cannot find raises error."""
        with pytest.raises(ConfigurationError) as exc_info:
            StreamConfig(encoding="no-such-codec")
        assert "Unknown encoding" in str(exc_info.value)
