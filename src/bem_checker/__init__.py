from __future__ import annotations

__version__ = "0.3.0"

from bem_checker.engine.detection import analyze_bem  # noqa: E402
from bem_checker.engine.types import FileResult, LintResult, LintSummary, Violation  # noqa: E402

__all__ = [
    "FileResult",
    "LintResult",
    "LintSummary",
    "Violation",
    "__version__",
    "analyze_bem",
]
