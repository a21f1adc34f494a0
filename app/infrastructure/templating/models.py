"""Render models for the templating system.

Defines the typed contexts each page template consumes and the uniform
result returned from a render call.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional

LAYOUT_TEMPLATE = "layout.html"
INDEX_TEMPLATE = "index.html"
ERROR_TEMPLATE = "error.html"

REQUIRED_TEMPLATES = (LAYOUT_TEMPLATE, INDEX_TEMPLATE, ERROR_TEMPLATE)


@dataclass(frozen=True)
class RenderContext:
    """Base class for the fixed set of variables a template consumes."""

    def as_dict(self) -> Dict[str, str]:
        """Return the context as the name -> value mapping templates read."""
        return asdict(self)


@dataclass(frozen=True)
class IndexContext(RenderContext):
    """Variables for ``index.html``.

    Attributes:
        lang: Resolved language code (e.g., "es").
        color: Display color from configuration.
    """

    lang: str
    color: str


@dataclass(frozen=True)
class ErrorContext(RenderContext):
    """Variables for ``error.html``.

    Attributes:
        lang: Language code the error page is rendered in.
        error: Human-readable error message.
        status_code: HTTP status code as text (e.g., "404").
    """

    lang: str
    error: str
    status_code: str


class RenderErrorKind(Enum):
    """Classification of render failures.

    Attributes:
        TEMPLATE_NOT_FOUND: No template with the requested name in the store
        RENDER_FAILURE: Template evaluation failed (undefined variable,
            syntax defect, runtime error)
    """

    TEMPLATE_NOT_FOUND = "template_not_found"
    RENDER_FAILURE = "render_failure"


@dataclass(frozen=True)
class RenderError:
    """Diagnostic describing why a render call failed."""

    kind: RenderErrorKind
    template: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.template}: {self.message}"


@dataclass(frozen=True)
class RenderResult:
    """Uniform result returned from a render call.

    Exactly one of ``body`` and ``error`` is set.

    Attributes:
        body: Rendered UTF-8 bytes on success
        error: RenderError on failure
    """

    body: Optional[bytes] = None
    error: Optional[RenderError] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if the render succeeded."""
        return self.error is None

    @classmethod
    def success(cls, body: bytes) -> "RenderResult":
        return cls(body=body)

    @classmethod
    def failure(
        cls, kind: RenderErrorKind, template: str, message: str
    ) -> "RenderResult":
        """Create a failed RenderResult.

        Args:
            kind: RenderErrorKind classifying the failure
            template: Name of the template that was requested
            message: Diagnostic message

        Returns:
            RenderResult carrying a RenderError
        """
        return cls(error=RenderError(kind=kind, template=template, message=message))
