from __future__ import annotations

from bem_checker.engine.detection import analyze_bem
from bem_checker.engine.types import Violation


def lint_html(content: str, *, ignore: tuple[str, ...] = ()) -> list[Violation]:
    result = analyze_bem(content, "test.html", ignore)
    assert result.summary.file_count == 1
    return list(result.files[0].violations)


def lint_class(class_name: str) -> list[Violation]:
    return lint_html(f'<div class="{class_name}"></div>')


def rule_ids(violations: list[Violation]) -> list[str]:
    return [v.rule_id for v in violations]
