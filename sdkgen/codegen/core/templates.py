"""
Template engine wrapper for snippet generation.

Provides a small interface over Jinja2 for rendering the
language-specific code snippets that appear in documentation.
"""

from typing import Any, Dict

from jinja2 import DictLoader, Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from ...logging_config import get_logger
from .naming import to_snake_case

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 over in-memory templates."""

    def __init__(self):
        self._templates: Dict[str, str] = {}
        self._env = self._setup_environment()

    def _setup_environment(self) -> Environment:
        """Setup Jinja2 environment with code generation utilities."""
        # Source code, not HTML: never escape quotes or angle brackets
        env = Environment(
            loader=DictLoader(self._templates),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

        env.filters["snake_case"] = to_snake_case
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template with the given context.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def add_template(self, name: str, content: str):
        """Add an in-memory template."""
        self._templates[name] = content
        logger.debug("Registered template %s", name)
