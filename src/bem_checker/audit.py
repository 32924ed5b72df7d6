from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from bem_checker.config import BemCheckerConfig
from bem_checker.engine.detection import analyze_bem
from bem_checker.engine.types import FileResult, LintResult, LintSummary
from bem_checker.scanner import discover_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileFailure:
    path: Path
    error: str


@dataclass(frozen=True, slots=True)
class AuditResult:
    files: tuple[Path, ...]
    result: LintResult
    failures: tuple[FileFailure, ...] = ()


@dataclass(frozen=True, slots=True)
class AuditCallbacks:
    on_files_discovered: Callable[[int], None] | None = None
    on_file_done: Callable[[Path], None] | None = None


def merge_results(results: Iterable[LintResult]) -> LintResult:
    """Concatenate per-file results and recompute the summary counts."""

    files: tuple[FileResult, ...] = tuple(f for r in results for f in r.files)
    return LintResult(
        summary=LintSummary(
            file_count=len(files),
            violation_count=sum(len(f.violations) for f in files),
        ),
        files=files,
    )


def display_path(path: Path, root: Path) -> str:
    """POSIX path relative to `root` when `path` lives under it, else absolute."""

    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except (OSError, RuntimeError, ValueError):
        return path.absolute().as_posix()


def audit_path(
    scan_path: Path,
    *,
    config: BemCheckerConfig,
    project_root: Path,
    callbacks: AuditCallbacks | None = None,
) -> AuditResult:
    files = discover_files(scan_path, extensions=config.extensions, exclude_dirs=config.exclude_dirs)
    logger.debug("discovered %d candidate file(s) under %s", len(files), scan_path)
    if callbacks is not None and callbacks.on_files_discovered is not None:
        callbacks.on_files_discovered(len(files))
    return audit_files(files, ignore_list=config.ignore_list, project_root=project_root, callbacks=callbacks)


def audit_files(
    files: Iterable[Path],
    *,
    ignore_list: Iterable[str] = (),
    project_root: Path,
    callbacks: AuditCallbacks | None = None,
) -> AuditResult:
    """
    Lint `files` one after another.

    A file that cannot be read is logged and recorded as a failure; the rest of
    the run continues.
    """

    patterns = tuple(ignore_list)
    paths = tuple(files)
    results: list[LintResult] = []
    failures: list[FileFailure] = []

    for path in paths:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
            results.append(analyze_bem(content, display_path(path, project_root), patterns))
        except (OSError, ValueError) as exc:
            logger.error("failed to read/process %s: %s", path, exc)
            failures.append(FileFailure(path=path, error=str(exc)))
        finally:
            if callbacks is not None and callbacks.on_file_done is not None:
                callbacks.on_file_done(path)

    merged = merge_results(results)
    logger.debug(
        "linted %d file(s): %d violation(s), %d failure(s)",
        merged.summary.file_count,
        merged.summary.violation_count,
        len(failures),
    )
    return AuditResult(files=paths, result=merged, failures=tuple(failures))
