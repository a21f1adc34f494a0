"""Templating system - immutable template store and safe rendering.

Main components:
- models: RenderContext, IndexContext, ErrorContext, RenderResult, RenderError
- store: TemplateStore and build_template_store
- renderer: render_template
"""

from infrastructure.templating.models import (
    ERROR_TEMPLATE,
    INDEX_TEMPLATE,
    LAYOUT_TEMPLATE,
    REQUIRED_TEMPLATES,
    ErrorContext,
    IndexContext,
    RenderContext,
    RenderError,
    RenderErrorKind,
    RenderResult,
)
from infrastructure.templating.renderer import render_template
from infrastructure.templating.store import (
    TemplateStore,
    TemplateStoreError,
    build_template_store,
    default_templates_dir,
)

__all__ = [
    "LAYOUT_TEMPLATE",
    "INDEX_TEMPLATE",
    "ERROR_TEMPLATE",
    "REQUIRED_TEMPLATES",
    "RenderContext",
    "IndexContext",
    "ErrorContext",
    "RenderError",
    "RenderErrorKind",
    "RenderResult",
    "TemplateStore",
    "TemplateStoreError",
    "build_template_store",
    "default_templates_dir",
    "render_template",
]
