"""Pytest configuration and fixtures."""

import pytest

from envlist import EnvironmentRegistry


MANAGED_VARS = [
    "APP_ENV",
    "NODE_ENV",
    "ENVLIST_PRIMARY_VAR",
    "ENVLIST_SECONDARY_VAR",
]


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """Start every test without APP_ENV / NODE_ENV or envlist overrides."""
    for name in MANAGED_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry():
    return EnvironmentRegistry()
