from __future__ import annotations

from bem_checker.engine.types import LintResult


def render_github_annotations(result: LintResult) -> str:
    lines: list[str] = []
    for f in result.files:
        for v in f.violations:
            msg = f"{v.rule_id} {v.message} ({v.original} -> {v.suggestion})"
            lines.append(f"::warning file={f.file_path},line={v.line},col={v.column}::{_escape(msg)}")
    return "\n".join(lines)


def _escape(text: str) -> str:
    # Workflow commands treat %, CR and LF as control characters.
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
