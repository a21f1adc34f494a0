"""Template rendering.

Renders a named template from the store against a context and reports every
failure as a RenderResult instead of raising, so callers decide the fallback.
"""

from typing import Mapping, Union

from jinja2 import TemplateError

from infrastructure.logging import get_module_logger
from infrastructure.templating.models import (
    RenderContext,
    RenderErrorKind,
    RenderResult,
)
from infrastructure.templating.store import TemplateStore

logger = get_module_logger()


def render_template(
    store: TemplateStore,
    name: str,
    context: Union[RenderContext, Mapping[str, str]],
) -> RenderResult:
    """Render a template to UTF-8 bytes.

    Args:
        store: Template store to read from. It is never modified.
        name: Template name (e.g., "index.html").
        context: Typed RenderContext or a plain name -> value mapping.

    Returns:
        RenderResult with the body on success, or a RenderError of kind
        TEMPLATE_NOT_FOUND or RENDER_FAILURE.
    """
    template = store.get(name)
    if template is None:
        logger.warning("template_not_found", template=name)
        return RenderResult.failure(
            RenderErrorKind.TEMPLATE_NOT_FOUND,
            name,
            f"Template not found: {name}",
        )

    if isinstance(context, RenderContext):
        variables = context.as_dict()
    else:
        variables = dict(context)

    try:
        rendered = template.render(variables)
    except TemplateError as e:
        logger.error("template_render_failed", template=name, error=str(e))
        return RenderResult.failure(RenderErrorKind.RENDER_FAILURE, name, str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.error(
            "template_render_crashed",
            template=name,
            error=str(e),
            error_type=type(e).__name__,
        )
        return RenderResult.failure(
            RenderErrorKind.RENDER_FAILURE, name, f"{type(e).__name__}: {e}"
        )

    return RenderResult.success(rendered.encode("utf-8"))
