"""Shared test fixtures for aggoutput."""

import pathlib

import pytest


PROJECT_ROOT = pathlib.Path(__file__).parent.parent


@pytest.fixture
def project_config_path():
    """Return the path to the aggoutput.toml shipped at the project root."""
    return PROJECT_ROOT / "aggoutput.toml"
