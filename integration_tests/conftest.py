"""Pytest configuration for integration tests."""

import tempfile
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Tag everything collected from this directory as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def db_path():
    """A database file that outlives individual Store instances in a test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "fitcoach.db"
