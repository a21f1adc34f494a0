"""Feature-level fixtures for templating tests."""

import pytest

from infrastructure.templating import TemplateStore


@pytest.fixture
def simple_sources():
    """Minimal layout/index/error sources honoring the template contract."""
    return {
        "layout.html": (
            '<html lang="{{ lang }}"><body>{% block content %}{% endblock %}</body></html>'
        ),
        "index.html": (
            "{% extends 'layout.html' %}"
            "{% block content %}<h1 style=\"color: {{ color }}\">{{ lang }}</h1>{% endblock %}"
        ),
        "error.html": (
            "{% extends 'layout.html' %}"
            "{% block content %}<h1>{{ status_code }}</h1><p>{{ error }}</p>{% endblock %}"
        ),
    }


@pytest.fixture
def simple_store(simple_sources):
    return TemplateStore.from_sources(simple_sources)


@pytest.fixture
def templates_dir(tmp_path, simple_sources):
    """Directory holding the simple template sources as files."""
    for name, source in simple_sources.items():
        (tmp_path / name).write_text(source, encoding="utf-8")
    return tmp_path
