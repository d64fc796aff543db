"""Interactive selection prompts for the ai-templates CLI."""

from __future__ import annotations

import sys
from typing import Dict, NoReturn

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table


class PromptUnavailableError(RuntimeError):
    """Raised when an interactive prompt cannot be rendered (no TTY on stdin)."""

    is_tty_error = True

    def __init__(self, message: str = "Prompt couldn't be rendered in the current environment"):
        super().__init__(message)


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def stdin_is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _resolve_console(console: Console | None) -> Console:
    return console or Console()


def _build_panel(options: Dict[str, str], prompt_text: str, selected_index: int) -> Panel:
    """Render the choices with the cursor on ``selected_index``."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=3)
    table.add_column(style="white", justify="left")

    for i, (key, label) in enumerate(options.items()):
        pointer = "▶" if i == selected_index else " "
        table.add_row(pointer, f"[cyan]{label}[/cyan] [dim]({key})[/dim]")

    table.add_row("", "")
    table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

    return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))


def _cancel(console: Console) -> NoReturn:
    console.print("\n[yellow]Selection cancelled[/yellow]")
    raise typer.Exit(1)


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    console: Console | None = None,
) -> str:
    """
    Interactive single-choice selection using arrow keys with Rich Live display.

    ``options`` maps identifiers to display labels; the first option starts
    highlighted and the chosen identifier is returned. Raises
    ``PromptUnavailableError`` when stdin is not a terminal.
    """
    if not stdin_is_interactive():
        raise PromptUnavailableError()

    console = _resolve_console(console)
    option_keys = list(options)
    selected_index = 0

    console.print()

    with Live(
        _build_panel(options, prompt_text, selected_index),
        console=console,
        transient=True,
        auto_refresh=False,
    ) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                _cancel(console)

            if key == "enter":
                break
            if key == "escape":
                _cancel(console)
            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)
            else:
                continue

            live.update(_build_panel(options, prompt_text, selected_index), refresh=True)

    selected_key = option_keys[selected_index]
    console.print(f"[bold]{prompt_text}[/bold] [cyan]{options[selected_key]}[/cyan]")
    return selected_key


__all__ = [
    "PromptUnavailableError",
    "get_key",
    "select_with_arrows",
    "stdin_is_interactive",
]
