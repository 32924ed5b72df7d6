from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from bem_checker.engine.types import SNIPPET_PATH, FileResult, LintResult, Violation


def render_terminal(
    result: LintResult,
    *,
    console: Console,
    project_root: Path | None = None,
    show_details: bool = True,
) -> None:
    if show_details:
        for file_result in result.files:
            _print_file(file_result, console=console, project_root=project_root)

    console.print()
    summary = result.summary
    style = "bold green" if summary.violation_count == 0 else "bold yellow"
    console.print(
        Text(
            f"Summary: {summary.file_count} file(s), {summary.violation_count} violation(s)",
            style=style,
        )
    )


def _print_file(file_result: FileResult, *, console: Console, project_root: Path | None) -> None:
    console.print()
    header = Text()
    header.append("File: ", style="dim")
    header.append(file_result.file_path, style="bold")
    console.print(header)

    if not file_result.violations:
        console.print(Text("  ✔ No BEM violations found", style="green"))
        return

    file_lines = _source_lines(file_result.file_path, project_root=project_root)
    for v in file_result.violations:
        _print_violation(console, v, file_lines=file_lines)


def _print_violation(console: Console, v: Violation, *, file_lines: list[str]) -> None:
    line = Text()
    line.append("  - ", style="yellow")
    line.append(f"[{v.rule_id}]", style="bold")
    line.append(f" {v.message}")
    console.print(line)

    console.print(f"      at {v.line}:{v.column}  original: {v.original}", style="dim", markup=False)
    idx = v.line - 1
    if 0 <= idx < len(file_lines):
        console.print(f"      {v.line:>4} │ {file_lines[idx].rstrip()}", style="dim", markup=False)
    if v.suggestion:
        console.print(f"      suggestion: {v.suggestion}", style="cyan", markup=False)


def _source_lines(file_path: str, *, project_root: Path | None) -> list[str]:
    # Relative paths are relative to the project root; stdin snippets have no file.
    if file_path == SNIPPET_PATH:
        return []
    source_path = Path(file_path)
    if not source_path.is_absolute():
        if project_root is None:
            return []
        source_path = project_root / source_path
    return _read_lines(source_path)


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return []
