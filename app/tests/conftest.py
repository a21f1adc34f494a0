"""Shared fixtures for the landing page service tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import limiter
from infrastructure.configuration import LandingPageSettings, Settings
from infrastructure.templating import TemplateStore, build_template_store
from server.server import create_app

TEST_COLOR = "teal"


@pytest.fixture
def settings():
    """Settings with the required COLOR provided."""
    return Settings(landing=LandingPageSettings(COLOR=TEST_COLOR))


@pytest.fixture(scope="session")
def template_store():
    """Template store built from the templates shipped with the app."""
    return build_template_store()


@pytest.fixture
def broken_template_store():
    """Template store whose index and error templates fail at render time."""
    return TemplateStore.from_sources(
        {
            "layout.html": "<html lang=\"{{ lang }}\">{% block content %}{% endblock %}</html>",
            "index.html": "{% extends 'layout.html' %}{% block content %}{{ missing }}{% endblock %}",
            "error.html": "{% extends 'layout.html' %}{% block content %}{{ missing }}{% endblock %}",
        }
    )


@pytest.fixture
def app(settings, template_store):
    return create_app(settings=settings, template_store=template_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield
