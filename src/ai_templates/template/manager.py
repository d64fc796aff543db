"""Template discovery, copy and legacy-layout helpers."""

from __future__ import annotations

import logging
import os
import shutil
from importlib.resources import files
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ai_templates.core.config import (
    LEGACY_RULES_FILENAME,
    RULES_DIRNAME,
    RULES_FILENAME,
    TEMPLATES_ROOT_ENV,
)

console = Console()
logger = logging.getLogger(__name__)


def get_package_templates_root() -> Path:
    """Return the ``templates/`` directory bundled with the package."""
    return Path(str(files("ai_templates"))) / "templates"


def resolve_templates_root(override_path: str | None = None) -> Path:
    """Return the directory holding ``<tool>/<category>/<framework>`` trees.

    Resolution order:
    1. ``override_path`` (from the ``--template-root`` option)
    2. ``AI_TEMPLATES_ROOT`` environment variable
    3. The templates bundled with the package

    An override that is not a directory is reported and ignored.
    """
    if override_path:
        override = Path(override_path).expanduser().resolve()
        if override.is_dir():
            return override
        logger.warning("Ignoring template root override %s: not a directory", override)
        console.print(
            f"[yellow]--template-root set to {escape(str(override))}, but it is not a directory. Ignoring.[/yellow]"
        )

    env_root = os.environ.get(TEMPLATES_ROOT_ENV)
    if env_root:
        root_path = Path(env_root).expanduser().resolve()
        if root_path.is_dir():
            return root_path
        logger.warning("Ignoring %s=%s: not a directory", TEMPLATES_ROOT_ENV, root_path)
        console.print(
            f"[yellow]{TEMPLATES_ROOT_ENV} set to {escape(str(root_path))}, but it is not a directory. Ignoring.[/yellow]"
        )

    return get_package_templates_root()


def template_source(root: Path, tool: str, category: str, framework: str) -> Path:
    """Return the template directory for a (tool, category, framework) triple."""
    return root / tool / category / framework


def copy_template_tree(source: Path, destination: Path) -> list[Path]:
    """Merge ``source`` into ``destination``.

    Directories are merged with whatever already exists, files at the same
    relative path are overwritten. Nothing in ``destination`` is removed.

    Returns:
        Sorted destination-relative paths of every copied file.
    """
    destination.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, destination, dirs_exist_ok=True)

    copied = sorted(path.relative_to(source) for path in source.rglob("*") if path.is_file())
    logger.debug("Copied %d file(s) from %s to %s", len(copied), source, destination)
    return copied


def migrate_legacy_cursor_rules(destination: Path) -> Path | None:
    """Move a top-level ``.cursorrules`` to ``rules/rules.mdc``.

    Replaces whatever already sits at ``rules/rules.mdc``, file or
    directory. Returns the new path, or ``None`` when there was nothing to
    migrate.
    """
    legacy = destination / LEGACY_RULES_FILENAME
    if not legacy.is_file():
        return None

    rules_dir = destination / RULES_DIRNAME
    rules_dir.mkdir(parents=True, exist_ok=True)
    target = rules_dir / RULES_FILENAME
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    shutil.move(str(legacy), str(target))
    logger.debug("Migrated %s to %s", legacy, target)
    return target


__all__ = [
    "copy_template_tree",
    "get_package_templates_root",
    "migrate_legacy_cursor_rules",
    "resolve_templates_root",
    "template_source",
]
