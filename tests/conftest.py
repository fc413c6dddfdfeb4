"""
Pytest configuration and fixtures for tabrecords tests.
"""

import pytest


@pytest.fixture
def tsv_path(tmp_path):
    """Path to a file that does not exist yet."""
    return tmp_path / "records.tsv"


@pytest.fixture
def make_tsv(tmp_path):
    """Create a file with the given raw text and return its path."""
    def _make(text, name="input.tsv"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    return _make


@pytest.fixture
def make_raw_tsv(tmp_path):
    """Create a file with the given raw bytes and return its path."""
    def _make(data, name="raw.tsv"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make
