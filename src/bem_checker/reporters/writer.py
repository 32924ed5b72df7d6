from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from bem_checker.config import DEFAULT_REPORT_DIR, DEFAULT_REPORT_FILENAME, BemCheckerConfig
from bem_checker.engine.types import LintResult
from bem_checker.reporters.json_reporter import render_json

logger = logging.getLogger(__name__)


def format_filename(pattern: str, now: datetime) -> str:
    """Expand `{YYYY}` `{MM}` `{DD}` `{HH}` `{mm}` `{ss}` placeholders."""

    replacements = {
        "{YYYY}": f"{now.year:04d}",
        "{MM}": f"{now.month:02d}",
        "{DD}": f"{now.day:02d}",
        "{HH}": f"{now.hour:02d}",
        "{mm}": f"{now.minute:02d}",
        "{ss}": f"{now.second:02d}",
    }
    for placeholder, value in replacements.items():
        pattern = pattern.replace(placeholder, value)
    return pattern


def resolve_report_path(config: BemCheckerConfig, *, project_dir: Path, now: datetime | None = None) -> Path:
    now = now or datetime.now()
    output = config.output
    if output.path and output.filename_pattern:
        return (project_dir / output.path) / format_filename(output.filename_pattern, now)
    return (project_dir / DEFAULT_REPORT_DIR) / format_filename(DEFAULT_REPORT_FILENAME, now)


def write_report(result: LintResult, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(result) + "\n", encoding="utf-8")
    return path


def write_report_safely(
    result: LintResult,
    config: BemCheckerConfig,
    *,
    project_dir: Path,
    now: datetime | None = None,
) -> Path | None:
    """Write the JSON report; log and return None instead of raising on failure."""

    try:
        path = resolve_report_path(config, project_dir=project_dir, now=now)
        return write_report(result, path)
    except OSError as exc:
        logger.error("failed to write report: %s", exc)
        return None
