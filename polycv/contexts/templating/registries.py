"""
Templating Registries

Centralized registry for loading and caching the HTML templates.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from jinja2.exceptions import TemplateError

from polycv.contexts.templating.exceptions import TemplateRenderError

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("POLYCV_TEMPLATES_PATH", str(Path(__file__).parent / "template"))
)

TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored in polycv/contexts/templating/template/ as
    {group}/{name}.html.jinja, e.g. "sections/skills" or "structure/document".
    Text values are inserted verbatim (no autoescaping) so descriptions may
    carry inline markup.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to POLYCV_TEMPLATES_PATH
                            from environment, else the templates shipped with the package
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'sections/skills')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with the given context.

        Context keys are free, including "name" (the person rendered in the
        header and the document title).

        Raises:
            TemplateRenderError: If Jinja2 fails while rendering (e.g. undefined variable)
        """
        template = self.get_template(template_name)
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render template", template_name=template_name, original_error=e
            ) from e

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template name."""
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache
