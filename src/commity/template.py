"""
Commit message rendering.

Answers are substituted into the configured template with Jinja2. Text and
choice answers are plain strings, boolean answers can drive `{% if %}`
blocks. Referencing a name that no entry defines is an error.
"""

from collections.abc import Mapping

from jinja2 import Environment, StrictUndefined, TemplateError


class TemplateRenderError(Exception):
    """Raised when the message template cannot be rendered."""

    pass


def _create_environment() -> Environment:
    return Environment(undefined=StrictUndefined, autoescape=False)


def render_message(values: Mapping[str, str | bool], template: str) -> str:
    """
    Render a message from collected field values.

    Args:
        values: Entry name to answer.
        template: Jinja template source.

    Returns:
        The rendered message.

    Raises:
        TemplateRenderError: On syntax errors or undefined references.
    """
    env = _create_environment()
    try:
        return env.from_string(template).render(dict(values))
    except TemplateError as e:
        raise TemplateRenderError(str(e)) from e
