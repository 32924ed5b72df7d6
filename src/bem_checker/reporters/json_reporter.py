from __future__ import annotations

import json
from typing import Any, cast, get_args

from bem_checker.engine.types import FileResult, LintResult, LintSummary, RuleId, Violation

_RULE_IDS = frozenset(get_args(RuleId))


def lint_result_to_dict(result: LintResult) -> dict[str, Any]:
    return {
        "summary": {
            "file_count": result.summary.file_count,
            "violation_count": result.summary.violation_count,
        },
        "files": [
            {
                "file_path": f.file_path,
                "violations": [_violation_to_dict(v) for v in f.violations],
            }
            for f in result.files
        ],
    }


def render_json(result: LintResult) -> str:
    return json.dumps(lint_result_to_dict(result), indent=2, ensure_ascii=False)


def _violation_to_dict(v: Violation) -> dict[str, Any]:
    return {
        "rule_id": v.rule_id,
        "message": v.message,
        "line": v.line,
        "column": v.column,
        "original": v.original,
        "suggestion": v.suggestion,
    }


def parse_json_report(text: str) -> LintResult:
    """
    Parse a report produced by `render_json()` back into a `LintResult`.

    Raises `ValueError` when the payload does not have the report shape.
    """

    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("JSON report must be an object.")

    summary_raw = data.get("summary")
    if not isinstance(summary_raw, dict):
        raise ValueError("JSON report missing required object: summary.")
    file_count = summary_raw.get("file_count")
    violation_count = summary_raw.get("violation_count")
    if not isinstance(file_count, int) or not isinstance(violation_count, int):
        raise ValueError("JSON report summary must contain integer file_count/violation_count.")

    files_raw = data.get("files", [])
    if not isinstance(files_raw, list):
        raise ValueError("JSON report `files` must be a list.")

    return LintResult(
        summary=LintSummary(file_count=file_count, violation_count=violation_count),
        files=tuple(_parse_file(item) for item in files_raw),
    )


def _parse_file(item: Any) -> FileResult:
    if not isinstance(item, dict):
        raise ValueError("JSON report file entries must be objects.")
    file_path = item.get("file_path")
    if not isinstance(file_path, str):
        raise ValueError("JSON report file entry missing `file_path`.")
    violations_raw = item.get("violations", [])
    if not isinstance(violations_raw, list):
        raise ValueError(f"JSON report `violations` for {file_path!r} must be a list.")
    return FileResult(
        file_path=file_path,
        violations=tuple(_parse_violation(v, file_path=file_path) for v in violations_raw),
    )


def _parse_violation(item: Any, *, file_path: str) -> Violation:
    if not isinstance(item, dict):
        raise ValueError(f"JSON report violations for {file_path!r} must be objects.")
    rule_id = item.get("rule_id")
    if not isinstance(rule_id, str) or rule_id not in _RULE_IDS:
        raise ValueError(f"JSON report violation in {file_path!r} has unknown rule_id: {rule_id!r}.")
    line = item.get("line")
    column = item.get("column")
    return Violation(
        rule_id=cast(RuleId, rule_id),
        message=str(item.get("message", "")),
        original=str(item.get("original", "")),
        suggestion=str(item.get("suggestion", "")),
        line=line if isinstance(line, int) and line > 0 else 1,
        column=column if isinstance(column, int) and column > 0 else 1,
    )
