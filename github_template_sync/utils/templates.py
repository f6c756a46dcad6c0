"""Contains utilities for rendering Jinja2 templates."""

from typing import Any

import jinja2
import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def construct_jinja2_environment() -> jinja2.Environment:
    """Construct a Jinja2 environment."""
    jinja_env = jinja2.Environment(undefined=jinja2.StrictUndefined, keep_trailing_newline=True)
    return jinja_env


def construct_jinja2_template_from_string(template_string: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Construct a Jinja2 template from a string."""
    if environment is None:
        environment = construct_jinja2_environment()
    return environment.from_string(template_string)


def render_template_string(template_string: str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template string against a context mapping."""
    template = construct_jinja2_template_from_string(template_string)
    try:
        rendered_template = template.render(context)
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template", template=template_string, context_keys=sorted(context), error=str(exc))
        raise
    return rendered_template
