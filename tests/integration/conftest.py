"""Shared setup for tests against a real PostgreSQL database."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under tests/integration as needing a database."""
    for item in items:
        if "integration" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.integration)
