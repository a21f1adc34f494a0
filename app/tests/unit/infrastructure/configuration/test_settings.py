"""Unit tests for infrastructure.configuration module.

Tests cover:
- LandingPageSettings required COLOR
- ServerSettings defaults and overrides
- Settings aggregation
- load_settings startup validation
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import (
    ConfigurationError,
    LandingPageSettings,
    ServerSettings,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run without a .env file and without the variables under test."""
    monkeypatch.chdir(tmp_path)
    for name in ("COLOR", "TEMPLATES_DIR", "HOST", "PORT", "WORKERS", "PREFIX", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLandingPageSettings:
    """Test suite for LandingPageSettings configuration."""

    def test_color_from_environment(self, monkeypatch):
        monkeypatch.setenv("COLOR", "purple")
        assert LandingPageSettings().COLOR == "purple"

    def test_color_is_required(self):
        with pytest.raises(ValidationError):
            LandingPageSettings()

    def test_blank_color_rejected(self, monkeypatch):
        monkeypatch.setenv("COLOR", "   ")
        with pytest.raises(ValidationError):
            LandingPageSettings()

    def test_color_from_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("COLOR=orange\n", encoding="utf-8")
        assert LandingPageSettings().COLOR == "orange"

    def test_templates_dir_default(self, monkeypatch):
        monkeypatch.setenv("COLOR", "red")
        assert LandingPageSettings().TEMPLATES_DIR is None


class TestServerSettings:
    """Test suite for ServerSettings configuration."""

    def test_defaults(self):
        server = ServerSettings()
        assert server.HOST == "0.0.0.0"
        assert server.PORT == 5000
        assert server.WORKERS == 4
        assert server.STATIC_DIR == "static"
        assert server.STATIC_ENABLED is True

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("WORKERS", "2")
        server = ServerSettings()
        assert server.PORT == 8080
        assert server.WORKERS == 2

    def test_workers_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("WORKERS", "0")
        with pytest.raises(ValidationError):
            ServerSettings()


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_subsettings_instantiated(self, monkeypatch):
        monkeypatch.setenv("COLOR", "green")
        settings = Settings()
        assert isinstance(settings.landing, LandingPageSettings)
        assert isinstance(settings.server, ServerSettings)
        assert settings.landing.COLOR == "green"

    def test_explicit_subsettings(self):
        settings = Settings(landing=LandingPageSettings(COLOR="navy"))
        assert settings.landing.COLOR == "navy"

    def test_is_production(self):
        settings = Settings(landing=LandingPageSettings(COLOR="navy"))
        assert settings.is_production is True

        settings = Settings(landing=LandingPageSettings(COLOR="navy"), PREFIX="dev-")
        assert settings.is_production is False


class TestLoadSettings:
    """Test suite for load_settings startup validation."""

    def test_missing_color_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        assert "COLOR" in exc_info.value.fields
        assert "COLOR" in str(exc_info.value)

    def test_returns_validated_settings(self, monkeypatch):
        monkeypatch.setenv("COLOR", "blue")
        settings = load_settings()
        assert settings.landing.COLOR == "blue"

    def test_overrides(self):
        settings = load_settings(landing=LandingPageSettings(COLOR="gold"))
        assert settings.landing.COLOR == "gold"
