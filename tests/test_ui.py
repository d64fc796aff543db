from __future__ import annotations

from typing import Iterable

import pytest
import readchar
import typer
from rich.console import Console

from ai_templates.cli import ui
from ai_templates.cli.ui import PromptUnavailableError, get_key, select_with_arrows

OPTIONS = {"cursor": "Cursor", "claude": "Claude", "gemini": "Gemini"}


@pytest.fixture()
def interactive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ui, "stdin_is_interactive", lambda: True)


def _feed_keys(monkeypatch: pytest.MonkeyPatch, keys: Iterable[str]) -> None:
    pending = iter(keys)

    def fake_get_key() -> str:
        key = next(pending)
        if key == "ctrl-c":
            raise KeyboardInterrupt
        return key

    monkeypatch.setattr(ui, "get_key", fake_get_key)


def test_enter_selects_first_option(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["enter"])

    assert select_with_arrows(OPTIONS, "Pick", console=console) == "cursor"


def test_down_moves_selection(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["down", "down", "enter"])

    assert select_with_arrows(OPTIONS, "Pick", console=console) == "gemini"


def test_up_wraps_to_last(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["up", "enter"])

    assert select_with_arrows(OPTIONS, "Pick", console=console) == "gemini"


def test_down_wraps_to_first(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["down", "down", "down", "enter"])

    assert select_with_arrows(OPTIONS, "Pick", console=console) == "cursor"


def test_selection_is_echoed(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["down", "enter"])

    select_with_arrows(OPTIONS, "Pick a tool", console=console)

    assert "Pick a tool Claude" in console.file.getvalue()


def test_other_keys_are_ignored(interactive, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    _feed_keys(monkeypatch, ["x", "down", "q", "enter"])

    assert select_with_arrows(OPTIONS, "Pick", console=console) == "claude"


@pytest.mark.parametrize("key", ["escape", "ctrl-c"])
def test_cancel_exits(interactive, monkeypatch: pytest.MonkeyPatch, console: Console, key: str) -> None:
    _feed_keys(monkeypatch, [key])

    with pytest.raises(typer.Exit) as excinfo:
        select_with_arrows(OPTIONS, "Pick", console=console)

    assert excinfo.value.exit_code == 1
    assert "Selection cancelled" in console.file.getvalue()


def test_non_tty_raises_prompt_unavailable(monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
    monkeypatch.setattr(ui, "stdin_is_interactive", lambda: False)

    with pytest.raises(PromptUnavailableError) as excinfo:
        select_with_arrows(OPTIONS, "Pick", console=console)

    assert excinfo.value.is_tty_error is True
    assert "couldn't be rendered" in str(excinfo.value)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (readchar.key.UP, "up"),
        (readchar.key.CTRL_P, "up"),
        (readchar.key.DOWN, "down"),
        (readchar.key.CTRL_N, "down"),
        (readchar.key.ENTER, "enter"),
        (readchar.key.ESC, "escape"),
        ("a", "a"),
    ],
)
def test_get_key_maps_readchar_keys(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setattr(ui.readchar, "readkey", lambda: raw)

    assert get_key() == expected


def test_get_key_ctrl_c_interrupts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ui.readchar, "readkey", lambda: readchar.key.CTRL_C)

    with pytest.raises(KeyboardInterrupt):
        get_key()
