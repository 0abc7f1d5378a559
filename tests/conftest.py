"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from sortkit.config import EngineSettings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings around each test so env changes never leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def ordinal_settings():
    """Settings with code-point string ordering, independent of the process locale."""
    return EngineSettings(string_collation="ordinal")


@pytest.fixture
def hosts():
    """Small heterogeneous record collection."""
    return [
        {"name": "node10", "state": "active", "meta": {"zone": "b", "cpu": 8}},
        {"name": "node2", "state": "error", "meta": {"zone": "a", "cpu": 4}},
        {"name": "node1", "state": "active", "meta": {"zone": "a"}},
        {"name": "gateway", "state": None, "meta": {"zone": "b", "cpu": 2}},
    ]
