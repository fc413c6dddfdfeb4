"""Core configuration for record streams."""

from tabrecords.core.config import ConfigurationError, StreamConfig

__all__ = [
    "ConfigurationError",
    "StreamConfig",
]
