import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import (
    ConfigurationError,
    LandingPageSettings,
    ServerSettings,
    Settings,
)
from infrastructure.templating import TemplateStoreError
from server import server


@pytest.fixture
def no_color_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COLOR", raising=False)


def test_create_app_stores_state(app, settings, template_store):
    assert isinstance(app, FastAPI)
    assert app.state.settings is settings
    assert app.state.template_store is template_store


def test_create_app_middleware_stack(app):
    middleware_classes = [m.cls.__name__ for m in app.user_middleware]
    assert middleware_classes == [
        "GZipMiddleware",
        "DefaultHeadersMiddleware",
        "RequestContextMiddleware",
        "ErrorPageMiddleware",
    ]


def test_create_app_disables_docs(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_create_app_requires_color(no_color_env):
    with pytest.raises(ConfigurationError) as exc_info:
        server.create_app()
    assert "COLOR" in exc_info.value.fields


def test_create_app_loads_settings_from_environment(monkeypatch, no_color_env):
    monkeypatch.setenv("COLOR", "crimson")
    app = server.create_app()
    assert app.state.settings.landing.COLOR == "crimson"
    assert "index.html" in app.state.template_store


def test_create_app_rejects_incomplete_templates(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<p>{{ color }}</p>", encoding="utf-8")
    monkeypatch.setenv("TEMPLATES_DIR", str(tmp_path))
    settings = Settings(landing=LandingPageSettings(COLOR="teal"))

    with pytest.raises(TemplateStoreError):
        server.create_app(settings=settings)


def test_static_files_mounted(tmp_path, template_store):
    (tmp_path / "site.css").write_text("body { color: teal; }", encoding="utf-8")
    settings = Settings(
        landing=LandingPageSettings(COLOR="teal"),
        server=ServerSettings(STATIC_DIR=str(tmp_path)),
    )

    with TestClient(server.create_app(settings, template_store)) as client:
        response = client.get("/static/site.css")

    assert response.status_code == 200
    assert "color: teal" in response.text


def test_static_files_skipped_when_missing(tmp_path, template_store):
    settings = Settings(
        landing=LandingPageSettings(COLOR="teal"),
        server=ServerSettings(STATIC_DIR=str(tmp_path / "missing")),
    )

    app = server.create_app(settings, template_store)
    assert all(getattr(route, "name", None) != "static" for route in app.routes)


def test_static_files_disabled(tmp_path, template_store):
    settings = Settings(
        landing=LandingPageSettings(COLOR="teal"),
        server=ServerSettings(STATIC_DIR=str(tmp_path), STATIC_ENABLED=False),
    )

    app = server.create_app(settings, template_store)
    assert all(getattr(route, "name", None) != "static" for route in app.routes)


def test_missing_static_file_renders_not_found_page(tmp_path, template_store):
    settings = Settings(
        landing=LandingPageSettings(COLOR="teal"),
        server=ServerSettings(STATIC_DIR=str(tmp_path)),
    )

    with TestClient(server.create_app(settings, template_store)) as client:
        response = client.get("/static/nope.css")

    assert response.status_code == 404
    assert "Page Not Found" in response.text


def test_static_directory_is_not_listed(tmp_path, template_store):
    (tmp_path / "site.css").write_text("body { color: teal; }", encoding="utf-8")
    settings = Settings(
        landing=LandingPageSettings(COLOR="teal"),
        server=ServerSettings(STATIC_DIR=str(tmp_path)),
    )

    with TestClient(server.create_app(settings, template_store)) as client:
        response = client.get("/static/")

    assert response.status_code == 404
    assert "site.css" not in response.text
    assert "Page Not Found" in response.text
