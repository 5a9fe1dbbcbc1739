"""Command and Lua script templates, rendered with jinja2."""

from .renderer import TemplateRenderer

__all__ = ["TemplateRenderer"]
