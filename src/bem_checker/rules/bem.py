from __future__ import annotations

import re

from bem_checker.engine.types import Violation
from bem_checker.rules.base import BaseRule, RuleMeta

ELEMENT_DELIMITER = "__"
MODIFIER_DELIMITER = "--"

_KEBAB_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_BLOCK_SPLIT_RE = re.compile(r"__|--")
_SEPARATOR_RUN_RE = re.compile(r"[_\s]+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_STARTS_LOWER_RE = re.compile(r"^[a-z]")
_UNDERSCORE_MODIFIER_RE = re.compile(r"__[^-\s]+_[^-\s]+")
_TRAILING_UNDERSCORE_SEGMENT_RE = re.compile(r"_([^_]+)$")
_TWO_PART_KEBAB_RE = re.compile(r"^[a-z0-9]+-[a-z0-9]+$")


def block_name(class_name: str) -> str:
    return _BLOCK_SPLIT_RE.split(class_name, maxsplit=1)[0]


def to_kebab_case(value: str) -> str:
    value = _SEPARATOR_RUN_RE.sub("-", value)
    value = _CAMEL_BOUNDARY_RE.sub(lambda m: f"{m.group(1)}-{m.group(2).lower()}", value)
    return value.lower()


class R4NoElementNesting(BaseRule):
    meta = RuleMeta(
        rule_id="R4_NO_ELEMENT_NESTING",
        title="No element nesting",
        description="BEM elements belong to a block, never to another element (`block__elem__sub`).",
    )

    def check(self, class_name: str) -> list[Violation]:
        if class_name.count(ELEMENT_DELIMITER) < 2:
            return []

        first, second, *rest = class_name.split(ELEMENT_DELIMITER)
        suggestion = f"{first}__{second}" + "".join(f"-{part}" for part in rest)
        return [
            self._violation(
                message="Nested element detected (`__` appears more than once); flatten sub-elements into one element name.",
                original=class_name,
                suggestion=suggestion,
            )
        ]


class R1CheckBlock(BaseRule):
    meta = RuleMeta(
        rule_id="R1_CHECK_BLOCK",
        title="Block name is kebab-case",
        description="The block segment (before the first `__` or `--`) must be lowercase kebab-case.",
    )

    def check(self, class_name: str) -> list[Violation]:
        block = block_name(class_name)
        if _KEBAB_RE.match(block):
            return []
        return [
            self._violation(
                message="Block name should be kebab-case (e.g. `profile-card`).",
                original=class_name,
                suggestion=to_kebab_case(block),
            )
        ]


class R2CheckElement(BaseRule):
    meta = RuleMeta(
        rule_id="R2_CHECK_ELEMENT",
        title="Element delimiter is `__`",
        description="Elements are joined to their block with `__`, not with `-` or a single `_`.",
    )

    def check(self, class_name: str) -> list[Violation]:
        if ELEMENT_DELIMITER in class_name or MODIFIER_DELIMITER in class_name:
            return []

        violations: list[Violation] = []
        # Two-part names like `section-faq` are plain kebab-case blocks.
        if len(class_name.split("-")) >= 3 and _STARTS_LOWER_RE.match(class_name):
            violations.append(
                self._violation(
                    message="Elements should be joined with `__`; avoid the `block-element` form.",
                    original=class_name,
                    suggestion=class_name.replace("-", "__", 1),
                )
            )
        if "_" in class_name:
            violations.append(
                self._violation(
                    message="Elements should be joined with `__`, not a single `_`.",
                    original=class_name,
                    suggestion=class_name.replace("_", "__"),
                )
            )
        return violations


class R3CheckModifier(BaseRule):
    meta = RuleMeta(
        rule_id="R3_CHECK_MODIFIER",
        title="Modifier delimiter is `--`",
        description="Modifiers are joined with `--`, not with `_` or a single `-`.",
    )

    def check(self, class_name: str) -> list[Violation]:
        violations: list[Violation] = []
        if _UNDERSCORE_MODIFIER_RE.search(class_name):
            violations.append(
                self._violation(
                    message="Modifiers should be joined with `--`; an `_` modifier was found.",
                    original=class_name,
                    suggestion=_TRAILING_UNDERSCORE_SEGMENT_RE.sub(r"--\1", class_name, count=1),
                )
            )
        if (
            _TWO_PART_KEBAB_RE.match(class_name)
            and ELEMENT_DELIMITER not in class_name
            and MODIFIER_DELIMITER not in class_name
        ):
            violations.append(
                self._violation(
                    message="Modifiers should use `--` (e.g. `block--modifier`).",
                    original=class_name,
                    suggestion=class_name.replace("-", "--", 1),
                )
            )
        return violations


class R5ModifierFormat(BaseRule):
    meta = RuleMeta(
        rule_id="R5_MODIFIER_FORMAT",
        title="Modifier format",
        description="Both sides of `--` must be non-empty: `block--modifier` or `block__element--modifier`.",
    )

    def check(self, class_name: str) -> list[Violation]:
        if MODIFIER_DELIMITER not in class_name:
            return []

        left, right = class_name.split(MODIFIER_DELIMITER)[:2]
        if left and right:
            return []
        return [
            self._violation(
                message="Malformed modifier; use `block--modifier` or `block__element--modifier`.",
                original=class_name,
                suggestion=f"{left}--modifier" if left and not right else "block--modifier",
            )
        ]


def builtin_bem_rules() -> list[BaseRule]:
    # Evaluation order is part of the output contract.
    return [
        R4NoElementNesting(),
        R1CheckBlock(),
        R2CheckElement(),
        R3CheckModifier(),
        R5ModifierFormat(),
    ]
