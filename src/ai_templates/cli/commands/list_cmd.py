"""Top-level ``ai-templates list`` command.

Shows every tool/category/framework combination offered by the prompts and
whether a template for it exists under the resolved templates root.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ai_templates.core.config import AI_CHOICES, CATEGORY_CHOICES, FRAMEWORK_CHOICES
from ai_templates.generator import display_path
from ai_templates.template.manager import resolve_templates_root, template_source

console = Console()


def iter_combinations() -> Iterator[tuple[str, str, str]]:
    """Yield every (tool, category, framework) triple in prompt order."""
    for tool in AI_CHOICES:
        for category in CATEGORY_CHOICES:
            for framework in FRAMEWORK_CHOICES[category]:
                yield tool, category, framework


def list_templates(
    template_root: Optional[str] = typer.Option(
        None,
        "--template-root",
        help="Directory containing <tool>/<category>/<framework> templates",
    ),
    available_only: bool = typer.Option(
        False,
        "--available",
        help="Only show combinations that have a template on disk",
    ),
) -> None:
    """List the templates offered for each AI tool."""
    root = resolve_templates_root(template_root)

    table = Table(title="AI Templates", show_lines=False)
    table.add_column("Tool", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Framework", style="bold")
    table.add_column("Status")

    shown = 0
    for tool, category, framework in iter_combinations():
        exists = template_source(root, tool, category, framework).is_dir()
        if available_only and not exists:
            continue
        table.add_row(
            AI_CHOICES[tool],
            CATEGORY_CHOICES[category],
            FRAMEWORK_CHOICES[category][framework],
            "[green]available[/green]" if exists else "[red]missing[/red]",
        )
        shown += 1

    console.print(table)
    console.print(f"[dim]{shown} combination(s) from {escape(display_path(root, Path.cwd()))}[/dim]")
