"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock

import structlog

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc123"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def clean_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
