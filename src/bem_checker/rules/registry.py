from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from bem_checker.engine.types import Violation
from bem_checker.rules.base import BaseRule, RuleMeta
from bem_checker.rules.bem import builtin_bem_rules

_RULE_ID_RE = re.compile(r"^R[0-9]+_[A-Z][A-Z_]*[A-Z]$")


@lru_cache(maxsize=1)
def builtin_rules() -> tuple[BaseRule, ...]:
    rules = builtin_bem_rules()

    seen: set[str] = set()
    for rule in rules:
        rule_id = rule.meta.rule_id
        if not _RULE_ID_RE.match(rule_id):  # pragma: no cover
            raise RuntimeError(f"Rule id must match {_RULE_ID_RE.pattern}: {rule_id!r}")
        if rule_id in seen:  # pragma: no cover
            raise RuntimeError(f"Duplicate rule id: {rule_id}")
        seen.add(rule_id)

    # Keep evaluation order (R4 first), not id order.
    return tuple(rules)


def rule_ids() -> tuple[str, ...]:
    return tuple(r.meta.rule_id for r in builtin_rules())


@lru_cache(maxsize=1)
def rule_meta_by_id() -> Mapping[str, RuleMeta]:
    return MappingProxyType({r.meta.rule_id: r.meta for r in builtin_rules()})


def rule_by_id(rule_id: str) -> BaseRule | None:
    """Look up a rule by full id (`R4_NO_ELEMENT_NESTING`) or short prefix (`R4`)."""

    canonical = rule_id.strip().upper()
    for rule in builtin_rules():
        if canonical in {rule.meta.rule_id, rule.meta.rule_id.split("_", 1)[0]}:
            return rule
    return None


def check_class_name(class_name: str) -> list[Violation]:
    """Run every built-in rule on one class token, in evaluation order."""

    violations: list[Violation] = []
    for rule in builtin_rules():
        violations.extend(rule.check(class_name))
    return violations
