"""Template management for ai-templates."""

from .manager import (
    copy_template_tree,
    get_package_templates_root,
    migrate_legacy_cursor_rules,
    resolve_templates_root,
    template_source,
)

__all__ = [
    "copy_template_tree",
    "get_package_templates_root",
    "migrate_legacy_cursor_rules",
    "resolve_templates_root",
    "template_source",
]
