"""Version information for tabrecords."""

__version__ = "1.0.0.dev0"
__version_info__ = (1, 0, 0, "dev0")

# Environment metadata
__environment__ = "local"
