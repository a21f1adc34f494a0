"""Tests for infrastructure.templating.store module."""

import pytest

from infrastructure.templating import (
    REQUIRED_TEMPLATES,
    TemplateStore,
    TemplateStoreError,
    build_template_store,
    default_templates_dir,
)


class TestTemplateStoreFromSources:
    """Tests for TemplateStore.from_sources()."""

    def test_compiles_every_source(self, simple_store):
        assert simple_store.names == ("error.html", "index.html", "layout.html")
        assert len(simple_store) == 3
        assert "index.html" in simple_store

    def test_missing_required_template_raises(self, simple_sources):
        del simple_sources["error.html"]
        with pytest.raises(TemplateStoreError, match="error.html"):
            TemplateStore.from_sources(simple_sources, required=REQUIRED_TEMPLATES)

    def test_syntax_error_raises(self):
        """Syntax defects fail when the store is built."""
        with pytest.raises(TemplateStoreError, match="broken.html"):
            TemplateStore.from_sources({"broken.html": "{% if lang %}unclosed"})

    def test_get_unknown_returns_none(self, simple_store):
        assert simple_store.get("nope.html") is None

    def test_store_is_read_only(self, simple_store):
        """The store exposes no way to add or replace templates."""
        with pytest.raises(TypeError):
            simple_store["index.html"] = None  # type: ignore[index]
        with pytest.raises(TypeError):
            simple_store._templates["extra.html"] = None  # pylint: disable=protected-access


class TestTemplateStoreFromDirectory:
    """Tests for TemplateStore.from_directory()."""

    def test_loads_html_files(self, templates_dir):
        (templates_dir / "notes.txt").write_text("ignored", encoding="utf-8")
        store = TemplateStore.from_directory(templates_dir)
        assert store.names == ("error.html", "index.html", "layout.html")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(TemplateStoreError, match="not found"):
            TemplateStore.from_directory(tmp_path / "missing")

    def test_missing_required_file_raises(self, templates_dir):
        (templates_dir / "index.html").unlink()
        with pytest.raises(TemplateStoreError, match="index.html"):
            TemplateStore.from_directory(templates_dir)


class TestBuildTemplateStore:
    """Tests for build_template_store()."""

    def test_default_directory_holds_shipped_templates(self):
        assert (default_templates_dir() / "index.html").is_file()

    def test_builds_shipped_templates(self):
        store = build_template_store()
        for name in REQUIRED_TEMPLATES:
            assert name in store

    def test_custom_directory(self, templates_dir):
        store = build_template_store(templates_dir)
        assert "layout.html" in store
