"""Process-wide template store.

The store is built once at startup from template source text, compiles every
template up front so syntax defects fail the startup, and is read-only for
the rest of the process lifetime.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

import structlog
from infrastructure.templating.models import REQUIRED_TEMPLATES

logger = structlog.get_logger()


class TemplateStoreError(Exception):
    """Raised when the template store cannot be built."""


class TemplateStore(Mapping[str, Template]):
    """Immutable mapping of template name to compiled template.

    Use ``TemplateStore.from_sources`` or ``TemplateStore.from_directory``
    to build one; nothing mutates it afterwards, so it can be shared by
    concurrent requests without locking.
    """

    def __init__(self, templates: Dict[str, Template]):
        self._templates = MappingProxyType(dict(templates))

    def __getitem__(self, name: str) -> Template:
        return self._templates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def names(self) -> tuple:
        return tuple(sorted(self._templates))

    @classmethod
    def from_sources(
        cls,
        sources: Mapping[str, str],
        required: Iterable[str] = (),
    ) -> "TemplateStore":
        """Compile templates from in-memory source text.

        Undefined variables raise at render time (StrictUndefined), and
        ``.html`` templates are autoescaped.

        Args:
            sources: Mapping of template name to template source.
            required: Names that must be present in ``sources``.

        Returns:
            TemplateStore with every source compiled.

        Raises:
            TemplateStoreError: If a required template is missing or any
                template fails to compile.
        """
        missing = [name for name in required if name not in sources]
        if missing:
            raise TemplateStoreError(f"Missing required templates: {missing}")

        environment = Environment(
            loader=DictLoader(dict(sources)),
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html"]),
        )

        templates = {}
        for name in sources:
            try:
                templates[name] = environment.get_template(name)
            except TemplateError as e:
                logger.error("template_compile_failed", template=name, error=str(e))
                raise TemplateStoreError(
                    f"Failed to compile template {name}: {e}"
                ) from e

        logger.info("template_store_built", templates=sorted(templates))
        return cls(templates)

    @classmethod
    def from_directory(
        cls,
        templates_dir: Path,
        required: Iterable[str] = REQUIRED_TEMPLATES,
    ) -> "TemplateStore":
        """Read every ``*.html`` file in a directory and compile it.

        Args:
            templates_dir: Directory holding the template sources.
            required: Names that must be present.

        Returns:
            TemplateStore built from the directory contents.

        Raises:
            TemplateStoreError: If the directory does not exist, a file
                cannot be read, a required template is missing or any
                template fails to compile.
        """
        templates_dir = Path(templates_dir)
        if not templates_dir.is_dir():
            raise TemplateStoreError(f"Templates directory not found: {templates_dir}")

        sources = {}
        for template_file in sorted(templates_dir.glob("*.html")):
            try:
                sources[template_file.name] = template_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateStoreError(
                    f"Failed to read template {template_file}: {e}"
                ) from e

        return cls.from_sources(sources, required=required)


def default_templates_dir() -> Path:
    """Return the templates directory shipped with the application."""
    # this file is at .../app/infrastructure/templating/store.py
    return Path(__file__).resolve().parents[2] / "templates"


def build_template_store(templates_dir: Optional[Path] = None) -> TemplateStore:
    """Build the application template store.

    Args:
        templates_dir: Template source directory (default: app/templates).

    Returns:
        TemplateStore holding the layout, index and error templates.

    Raises:
        TemplateStoreError: If the templates cannot be loaded or compiled.
    """
    return TemplateStore.from_directory(templates_dir or default_templates_dir())
