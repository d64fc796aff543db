"""Helpers shared by the ai-templates test suite."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console


def write_template(root: Path, tool: str, category: str, framework: str, files: dict[str, str]) -> Path:
    """Create ``root/tool/category/framework`` holding ``files`` (relative path -> text)."""
    template_dir = root / tool / category / framework
    template_dir.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        target = template_dir / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return template_dir


def console_output(console: Console) -> str:
    return console.file.getvalue()
