"""Reporting helpers for failures a review run survives.

Config and discovery problems never abort a run: they are either logged for
``--debug`` or shown once on stderr, and the run continues with defaults.
"""

from __future__ import annotations

import logging
import sys

from playwright_review.utils import colorize


def log_best_effort_failure(
    logger: logging.Logger, action: str, exc: Exception
) -> None:
    """Debug-log a recovered failure, e.g. an unreadable config or test directory."""
    logger.debug("Continuing after failure to %s: %s", action, exc)


def print_error(message: str) -> None:
    """Report a usage error (bad --jobs / --fail-under) on stderr."""
    print(colorize(f"  Error: {message}", "red"), file=sys.stderr)


def warn_best_effort(message: str) -> None:
    """Warn on stderr about a config value that was replaced by its default."""
    print(colorize(f"  WARNING: {message}", "yellow"), file=sys.stderr)


__all__ = [
    "log_best_effort_failure",
    "print_error",
    "warn_best_effort",
]
