from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Utility/state classes and third-party widget classes that never follow BEM.
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    r"^is-",
    r"swiper(?:-|$)",
    r"material-symbols(?:-|$)",
)


def compile_ignore_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a user ignore pattern.

    Patterns are tried as regular expressions first. Anything that does not
    compile, including patterns too large or too deeply nested for `re`, is
    treated as a wildcard pattern: `*` matches any substring and every other
    character is literal. Matching is unanchored in both cases.
    """

    try:
        return re.compile(pattern)
    except (re.error, OverflowError, RecursionError):
        return re.compile(".*".join(re.escape(part) for part in pattern.split("*")))


@dataclass(frozen=True, slots=True)
class IgnoreMatcher:
    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def from_patterns(cls, user_patterns: Iterable[str] = ()) -> IgnoreMatcher:
        combined = (*DEFAULT_IGNORE_PATTERNS, *user_patterns)
        return cls(patterns=tuple(compile_ignore_pattern(p) for p in combined))

    def is_ignored(self, class_name: str) -> bool:
        return any(p.search(class_name) for p in self.patterns)
