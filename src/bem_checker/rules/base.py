from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bem_checker.engine.types import RuleId, Violation


@dataclass(frozen=True, slots=True)
class RuleMeta:
    rule_id: RuleId
    title: str
    description: str


class BaseRule(ABC):
    meta: RuleMeta

    @abstractmethod
    def check(self, class_name: str) -> list[Violation]:
        """Return violations for a single class token (positions default to 1:1)."""

    def _violation(self, *, message: str, original: str, suggestion: str) -> Violation:
        return Violation(
            rule_id=self.meta.rule_id,
            message=message,
            original=original,
            suggestion=suggestion,
        )
