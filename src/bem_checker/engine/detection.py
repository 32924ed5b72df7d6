from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from bem_checker.engine.extract import extract_class_names
from bem_checker.engine.ignore import IgnoreMatcher
from bem_checker.engine.types import SNIPPET_PATH, FileResult, LintResult, LintSummary, Violation
from bem_checker.rules.registry import check_class_name


def analyze_bem(content: str, file_path: str, user_ignore_list: Iterable[str] = ()) -> LintResult:
    """
    Lint the class names found in `content` and return a single-file result.

    Tokens matching a built-in or user ignore pattern are skipped entirely.
    Every rule runs on every remaining token; violations are stamped with the
    token position and kept in discovery order.
    """

    ignore = IgnoreMatcher.from_patterns(user_ignore_list)
    violations: list[Violation] = []

    for token in extract_class_names(content):
        if ignore.is_ignored(token.class_name):
            continue
        for v in check_class_name(token.class_name):
            violations.append(replace(v, line=token.line, column=token.column))

    return LintResult(
        summary=LintSummary(file_count=1, violation_count=len(violations)),
        files=(FileResult(file_path=file_path or SNIPPET_PATH, violations=tuple(violations)),),
    )
