from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console

from bem_checker import __version__
from bem_checker.audit import AuditCallbacks, AuditResult, audit_path
from bem_checker.config import BemCheckerConfig, load_config_or_default
from bem_checker.engine.detection import analyze_bem
from bem_checker.engine.types import SNIPPET_PATH, LintResult
from bem_checker.logging_utils import configure_logging
from bem_checker.reporters.github import render_github_annotations
from bem_checker.reporters.json_reporter import render_json
from bem_checker.reporters.terminal import render_terminal
from bem_checker.reporters.writer import write_report_safely

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="bem-checker — lint CSS class names against BEM naming conventions.",
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

_FORMATS = ("terminal", "json", "github")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose logs (printed to stderr)."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Reduce non-essential output."),
    ] = False,
    progress: Annotated[
        bool,
        typer.Option("--progress/--no-progress", help="Show a progress bar for large directories.", show_default=True),
    ] = True,
) -> None:
    """bem-checker CLI."""

    if verbose and quiet:
        raise typer.BadParameter("Choose at most one: --verbose or --quiet.")
    configure_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {"verbose": verbose, "quiet": quiet, "progress": progress}


def _cli_settings() -> dict[str, bool]:
    ctx = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.obj, dict):
        return {"verbose": False, "quiet": False, "progress": True}
    return {
        "verbose": bool(ctx.obj.get("verbose", False)),
        "quiet": bool(ctx.obj.get("quiet", False)),
        "progress": bool(ctx.obj.get("progress", True)),
    }


def _normalize_format(output_format: str, *, as_json: bool) -> str:
    normalized = "json" if as_json else output_format.strip().lower()
    if normalized not in _FORMATS:
        raise typer.BadParameter(f"Unsupported format. Use: {', '.join(_FORMATS)}.")
    return normalized


def _emit_output(fmt: str, *, result: LintResult, project_root: Path, show_details: bool) -> None:
    if fmt == "json":
        typer.echo(render_json(result))
    elif fmt == "github":
        typer.echo(render_github_annotations(result))
    else:
        render_terminal(result, console=console, project_root=project_root, show_details=show_details)


def _audit_with_optional_progress(
    path: Path,
    *,
    config: BemCheckerConfig,
    project_root: Path,
    show_progress: bool,
) -> AuditResult:
    if not show_progress:
        return audit_path(path, config=config, project_root=project_root)

    from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn, TimeElapsedColumn

    progress = Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=Console(stderr=True),
        transient=True,
    )
    task = progress.add_task("Linting", total=None)

    def _on_discovered(total: int) -> None:
        progress.update(task, total=total, completed=0)

    def _on_done(_path: Path) -> None:
        progress.advance(task, 1)

    callbacks = AuditCallbacks(on_files_discovered=_on_discovered, on_file_done=_on_done)
    with progress:
        return audit_path(path, config=config, project_root=project_root, callbacks=callbacks)


@app.command()
def check(
    path: Annotated[
        str,
        typer.Argument(help="File or directory to check, or '-' to read a snippet from stdin."),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json, github.", show_default=True),
    ] = "terminal",
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Shortcut for --format json."),
    ] = False,
    project_root: Annotated[
        Path,
        typer.Option(
            "--project-root",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Directory holding .bem-checker-rc.json / pyproject.toml; reports are written relative to it.",
        ),
    ] = Path("."),
    ignore: Annotated[
        list[str] | None,
        typer.Option("--ignore", help="Extra ignore pattern (regex or `*` wildcard). Repeatable."),
    ] = None,
    write_report: Annotated[
        bool,
        typer.Option("--write-report/--no-write-report", help="Write a timestamped JSON report file.", show_default=True),
    ] = True,
    fail_on_violations: Annotated[
        bool,
        typer.Option("--fail-on-violations", help="Exit with code 1 when any violation is found."),
    ] = False,
) -> None:
    """
    Check class names in HTML/JSX/TSX/Vue sources for BEM violations.
    """

    settings = _cli_settings()
    fmt = _normalize_format(output_format, as_json=as_json)

    config = load_config_or_default(project_root)
    ignore_list = (*config.ignore_list, *(ignore or ()))
    if config.source is not None:
        logger.debug("using config %s", config.source)

    if path.strip() == "-":
        result = analyze_bem(sys.stdin.buffer.read().decode("utf-8", errors="replace"), SNIPPET_PATH, ignore_list)
    else:
        scan_path = Path(path)
        audit = _audit_with_optional_progress(
            scan_path,
            config=replace(config, ignore_list=ignore_list),
            project_root=project_root,
            show_progress=settings["progress"] and not settings["quiet"] and fmt == "terminal",
        )
        if not audit.files:
            err_console.print(f"No files found to check at: {path}")
            raise typer.Exit(code=1)
        result = audit.result

    _emit_output(fmt, result=result, project_root=project_root, show_details=not settings["quiet"])

    if write_report:
        written = write_report_safely(result, config, project_dir=project_root)
        if written is not None:
            logger.info("wrote report to %s", written)

    if fail_on_violations and result.summary.violation_count > 0:
        raise typer.Exit(code=1)


@app.command()
def rules(
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json.", show_default=True),
    ] = "terminal",
) -> None:
    """
    List the built-in rules in evaluation order.
    """

    from rich.table import Table

    from bem_checker.rules.registry import builtin_rules

    rows = [
        {"rule_id": r.meta.rule_id, "title": r.meta.title, "description": r.meta.description}
        for r in builtin_rules()
    ]

    normalized = output_format.strip().lower()
    if normalized == "json":
        typer.echo(json.dumps(rows, indent=2))
        return
    if normalized != "terminal":
        raise typer.BadParameter("Unsupported format. Use: terminal, json.")

    table = Table(title="bem-checker rules")
    table.add_column("ID", style="bold")
    table.add_column("Title")
    table.add_column("Description")
    for row in rows:
        table.add_row(row["rule_id"], row["title"], row["description"])
    console.print(table)


@app.command()
def explain(
    rule_id: Annotated[
        str,
        typer.Argument(help="Rule id to explain (e.g. R4 or R4_NO_ELEMENT_NESTING)."),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: terminal, json.", show_default=True),
    ] = "terminal",
) -> None:
    """
    Explain a single rule with a bad/good example.
    """

    from rich.panel import Panel
    from rich.syntax import Syntax
    from rich.text import Text

    from bem_checker.rules.examples import EXAMPLES
    from bem_checker.rules.registry import rule_by_id

    rule = rule_by_id(rule_id)
    if rule is None:
        raise typer.BadParameter(f"Unknown rule id: {rule_id!r}. Use `bem-checker rules` to list available rules.")

    meta = rule.meta
    example = EXAMPLES.get(meta.rule_id)

    normalized = output_format.strip().lower()
    if normalized == "json":
        payload = {
            "rule_id": meta.rule_id,
            "title": meta.title,
            "description": meta.description,
            "example": (
                {
                    "language": example.language,
                    "bad": example.bad,
                    "good": example.good,
                    "notes": example.notes,
                }
                if example is not None
                else None
            ),
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    if normalized != "terminal":
        raise typer.BadParameter("Unsupported format. Use: terminal, json.")

    header = Text()
    header.append(meta.rule_id, style="bold")
    header.append(" — ", style="dim")
    header.append(meta.title)
    console.print(Panel(meta.description, title=header, border_style="cyan"))

    console.print(Text("Ignore list (.bem-checker-rc.json):", style="bold"))
    console.print(Syntax('{\n  "ignoreList": ["^js-", "u-*"]\n}\n', "json", word_wrap=True))

    if example is not None:
        console.print(Text("Example:", style="bold"))
        if example.notes:
            console.print(Text(example.notes, style="dim"))
        console.print(Text("Bad:", style="bold"))
        console.print(Syntax(example.bad, example.language, word_wrap=True))
        if example.good is not None:
            console.print(Text("Good:", style="bold"))
            console.print(Syntax(example.good, example.language, word_wrap=True))
