"""
Pytest configuration and fixtures for test isolation.
"""
import gzip
import logging
import os

import pytest

from proofreader.utils.logging_config import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by a test so later tests start clean."""
    yield
    logging_config.reset()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    for name in list(os.environ):
        if name.startswith("PROOFREADER_"):
            del os.environ[name]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def write_gzip(tmp_path):
    """Write delimited rows to a gzip file and return its path.

    Usage:
        path = write_gzip([["id", "count"], ["a", "1"]], delimiter=",")
    """
    def _write(rows, delimiter="|", name="input.csv.gz"):
        path = tmp_path / name
        text = "".join(delimiter.join(row) + "\n" for row in rows)
        with gzip.open(path, "wt", encoding="utf-8", newline="") as f:
            f.write(text)
        return str(path)
    return _write


@pytest.fixture
def uuid_value():
    return "123e4567-e89b-12d3-a456-426614174000"
