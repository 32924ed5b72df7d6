from __future__ import annotations

import logging

import pytest

from bem_checker.logging_utils import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_resolve_log_level(verbose: bool, quiet: bool, expected: int) -> None:
    assert resolve_log_level(verbose=verbose, quiet=quiet) == expected


def test_configure_logging_sets_root_level() -> None:
    configure_logging(verbose=False, quiet=True)
    assert logging.getLogger().level == logging.WARNING
    configure_logging(verbose=True, quiet=False)
    assert logging.getLogger().level == logging.DEBUG
