"""CLI command modules for ai-templates."""

from .list_cmd import list_templates

__all__ = ["list_templates"]
