from __future__ import annotations

import logging
import sys

LOG_PREFIX = "bem-checker"


def resolve_log_level(*, verbose: bool, quiet: bool) -> int:
    # The CLI rejects --verbose with --quiet; programmatic callers get DEBUG.
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool, quiet: bool) -> None:
    """
    Configure process-wide logging for CLI usage.

    Logs go to stderr so `--format json` output on stdout stays parseable.
    Verbose mode adds the level and logger name to each record.
    """

    fmt = f"{LOG_PREFIX}: %(message)s"
    if verbose:
        fmt = f"{LOG_PREFIX} [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=resolve_log_level(verbose=verbose, quiet=quiet),
        format=fmt,
        stream=sys.stderr,
        force=True,
    )
