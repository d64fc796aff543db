"""Select an assistant template and materialize it into the working directory."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ai_templates.cli.ui import select_with_arrows
from ai_templates.core.config import (
    AI_CHOICES,
    BANNER,
    CATEGORY_CHOICES,
    FRAMEWORK_CHOICES,
    LEGACY_RULES_TOOL,
    TAGLINE,
)
from ai_templates.template.manager import (
    copy_template_tree,
    migrate_legacy_cursor_rules,
    resolve_templates_root,
    template_source,
)

logger = logging.getLogger(__name__)


class UnknownCategoryError(ValueError):
    """Raised when a category has no entry in the framework table."""


def display_path(path: Path, base: Path) -> str:
    """Render ``path`` as ``./relative`` when it lives under ``base``."""
    try:
        return f"./{path.relative_to(base).as_posix()}"
    except ValueError:
        return str(path)


class TemplateGenerator:
    """Drive tool/category/framework selection and copy the matching template."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        console: Console | None = None,
        cwd: Path | None = None,
    ):
        self.templates_dir = templates_dir if templates_dir is not None else resolve_templates_root()
        self.console = console or Console()
        self._cwd = cwd

    @property
    def cwd(self) -> Path:
        return self._cwd if self._cwd is not None else Path.cwd()

    def select_tool(self) -> str:
        self.console.print(f"[blue]{BANNER}[/blue]")
        self.console.print(f"[bright_black]{TAGLINE}[/bright_black]\n")
        return select_with_arrows(
            AI_CHOICES,
            "Please select the AI you want to use:",
            console=self.console,
        )

    def select_category(self) -> str:
        return select_with_arrows(
            CATEGORY_CHOICES,
            "Please select the category:",
            console=self.console,
        )

    def select_framework(self, category: str) -> str:
        frameworks = FRAMEWORK_CHOICES.get(category)
        if not frameworks:
            raise UnknownCategoryError(f"No frameworks available for category: {category}")

        return select_with_arrows(
            frameworks,
            f"Please select the {category} framework:",
            console=self.console,
        )

    def generate(self, tool: str, category: str, framework: str) -> Path | None:
        """Copy the template for the triple into ``./.<tool>``.

        Failures are reported on the console and ``None`` is returned; the
        destination is returned on success. A missing template leaves the
        working directory untouched. Copy errors are not rolled back.
        """
        source = template_source(self.templates_dir, tool, category, framework)

        if not source.exists():
            logger.debug("No template directory at %s", source)
            self.console.print(f"[red]❌ Template not found for {tool}/{category}/{framework}[/red]")
            return None

        output_dir = self.cwd / f".{tool}"

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            copy_template_tree(source, output_dir)

            if tool == LEGACY_RULES_TOOL:
                migrate_legacy_cursor_rules(output_dir)
        except OSError as exc:
            logger.debug("Template generation failed", exc_info=True)
            self.console.print(f"[red]❌ Error generating template: {escape(str(exc))}[/red]")
            return None

        self.console.print(f"[green]✅ Successfully generated {tool} template for {framework}![/green]")
        self.console.print(
            f"[bright_black]📁 Files created in: {escape(display_path(output_dir, self.cwd))}[/bright_black]"
        )
        return output_dir


__all__ = ["TemplateGenerator", "UnknownCategoryError", "display_path"]
