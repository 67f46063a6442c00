"""Shared fixtures for layered_config tests."""

import io
from pathlib import Path

import pytest

from layered_config import (
    DefaultLogger,
    MappingEnvironmentReader,
    reset_configuration,
    reset_openai_configuration,
)

RESOURCES_DIR = Path(__file__).parent / "resources"


@pytest.fixture(autouse=True)
def isolated_shared_instances():
    """Every test starts and ends without shared store instances."""
    reset_configuration()
    reset_openai_configuration()
    yield
    reset_configuration()
    reset_openai_configuration()


@pytest.fixture
def resources_dir() -> Path:
    return RESOURCES_DIR


@pytest.fixture
def application_properties() -> Path:
    return RESOURCES_DIR / "application.properties"


@pytest.fixture
def empty_env() -> MappingEnvironmentReader:
    """Environment where nothing is set."""
    return MappingEnvironmentReader()


@pytest.fixture
def log_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def capture_logger(log_output: io.StringIO) -> DefaultLogger:
    return DefaultLogger(name="test-config", output=log_output, include_timestamp=False)
