from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RuleId = Literal[
    "R4_NO_ELEMENT_NESTING",
    "R1_CHECK_BLOCK",
    "R2_CHECK_ELEMENT",
    "R3_CHECK_MODIFIER",
    "R5_MODIFIER_FORMAT",
]

SNIPPET_PATH = "snippet"


@dataclass(frozen=True, slots=True)
class Violation:
    rule_id: RuleId
    message: str
    original: str
    suggestion: str
    line: int = 1  # 1-based
    column: int = 1  # 1-based


@dataclass(frozen=True, slots=True)
class FileResult:
    file_path: str
    violations: tuple[Violation, ...] = ()


@dataclass(frozen=True, slots=True)
class LintSummary:
    file_count: int
    violation_count: int


@dataclass(frozen=True, slots=True)
class LintResult:
    summary: LintSummary
    files: tuple[FileResult, ...] = ()
