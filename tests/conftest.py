from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from ai_templates.core.config import TEMPLATES_ROOT_ENV


@pytest.fixture()
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir()
    return root


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=200)


@pytest.fixture(autouse=True)
def _clear_templates_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TEMPLATES_ROOT_ENV, raising=False)
