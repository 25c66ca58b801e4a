"""
Jinja2 Template Engine for stylesheet and script generation

Provides centralized template loading and rendering for the files gridkit
ships alongside the compiled CSS (the serialized registry stylesheet and the
companion runtime script).

Usage:
    from gridkit.template_engine import render_template

    css = render_template("breakpoints.css", meta_class="gridkit-mq", serialized="small=0em")
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


class TemplateEngine:
    """
    Centralized template engine.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing templates (default: gridkit/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),  # CSS/JS templates are not HTML-escaped
            undefined=StrictUndefined,  # Missing variables fail the build instead of rendering ""
            trim_blocks=True,  # Remove first newline after template tag
            lstrip_blocks=True,  # Strip leading spaces/tabs from start of line
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Name of template file (relative to templates dir)
            **context: Template variables

        Returns:
            Rendered text

        Example:
            css = engine.render("breakpoints.css", meta_class="gridkit-mq", serialized="small=0em")
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


# Global template engine instance
_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).

    Returns:
        TemplateEngine: The template engine
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """
    Convenience function to render a template.

    Args:
        template_name: Name of template file
        **context: Template variables

    Returns:
        Rendered text
    """
    engine = get_template_engine()
    return engine.render(template_name, **context)
