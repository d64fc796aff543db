#!/usr/bin/env python3
"""
AI Templates CLI - copy AI assistant templates into a project.

Usage:
    ai-templates
    ai-templates --tool cursor --category backend --framework fastify
    ai-templates list
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ai_templates.cli.commands import list_templates
from ai_templates.cli.ui import PromptUnavailableError
from ai_templates.core.config import AI_CHOICES, CATEGORY_CHOICES, FRAMEWORK_CHOICES
from ai_templates.generator import TemplateGenerator, UnknownCategoryError
from ai_templates.template.manager import resolve_templates_root

try:
    __version__ = version("ai-templates")
except PackageNotFoundError:
    __version__ = "0.0.0"

console = Console()

app = typer.Typer(
    name="ai-templates",
    help="Generate templates for your favorite AI tools",
    add_completion=False,
    invoke_without_command=True,
)

app.command("list")(list_templates)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ai-templates {__version__}")
        raise typer.Exit()


def _require_choice(kind: str, value: str, choices: dict[str, str]) -> str:
    key = value.strip().lower()
    if key not in choices:
        raise ValueError(f"Invalid {kind} '{value}'. Choose from: {', '.join(choices)}")
    return key


def run_cli(
    tool: Optional[str] = None,
    category: Optional[str] = None,
    framework: Optional[str] = None,
    template_root: Optional[str] = None,
) -> None:
    """Run the tool -> category -> framework selection and generate the template.

    Generation failures are reported by the generator and do not change the
    exit status. Exits 1 when a selection is invalid, cancelled, or fails.
    """
    generator = TemplateGenerator(
        templates_dir=resolve_templates_root(template_root),
        console=console,
    )

    try:
        tool = _require_choice("tool", tool, AI_CHOICES) if tool else generator.select_tool()
        category = (
            _require_choice("category", category, CATEGORY_CHOICES) if category else generator.select_category()
        )
        if framework:
            if category not in FRAMEWORK_CHOICES:
                raise UnknownCategoryError(f"No frameworks available for category: {category}")
            framework = _require_choice(f"{category} framework", framework, FRAMEWORK_CHOICES[category])
        else:
            framework = generator.select_framework(category)
    except PromptUnavailableError:
        console.print("[red]❌ Prompt couldn't be rendered in the current environment[/red]")
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as exc:
        console.print(f"[red]❌ Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    console.print(f"[yellow]\n🔧 Generating {tool} template for {framework}...[/yellow]")
    generator.generate(tool, category, framework)


@app.callback()
def callback(
    ctx: typer.Context,
    tool: Optional[str] = typer.Option(
        None,
        "--tool",
        "-t",
        help=f"AI tool to generate for ({', '.join(AI_CHOICES)}); prompts when omitted",
    ),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help=f"Project category ({', '.join(CATEGORY_CHOICES)}); prompts when omitted",
    ),
    framework: Optional[str] = typer.Option(
        None,
        "--framework",
        "-f",
        help="Framework within the category; prompts when omitted",
    ),
    template_root: Optional[str] = typer.Option(
        None,
        "--template-root",
        help="Directory containing <tool>/<category>/<framework> templates",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Generate templates for your favorite AI tools."""
    if ctx.invoked_subcommand is None:
        run_cli(tool=tool, category=category, framework=framework, template_root=template_root)


def main():
    app()


if __name__ == "__main__":
    main()
