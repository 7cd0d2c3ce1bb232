"""Shared utilities: project root, colors, path helpers."""

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(os.environ.get("PLAYWRIGHT_REVIEW_ROOT", Path.cwd())).resolve()

# Directories pruned during traversal; they never hold reviewable test sources.
DEFAULT_EXCLUSIONS = frozenset({
    "node_modules", ".git", "__pycache__", ".venv", "venv",
    "dist", "build", ".next", ".nuxt", ".output",
    "playwright-report", "test-results", "blob-report",
    ".svn", ".hg",
})

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
}

NO_COLOR = os.environ.get("NO_COLOR") is not None


def colorize(text: str, color: str) -> str:
    if NO_COLOR or not sys.stdout.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def normalize_path(filepath: str) -> str:
    """Collapse ``./`` prefixes and duplicate separators, always using ``/``."""
    return os.path.normpath(filepath).replace("\\", "/")


def matches_exclusion(rel_path: str, exclusion: str) -> bool:
    """True when an ``--exclude`` pattern covers *rel_path* (a ``/``-joined path).

    A bare name excludes every path with that directory or file name in it, so
    ``wip`` drops ``wip/cart.spec.ts`` and ``tests/wip/cart.spec.ts`` but keeps
    ``tests/wip-cart.spec.ts``. A pattern containing ``/`` is a directory
    prefix: ``tests/wip`` covers that directory and everything below it.
    """
    if exclusion in rel_path.split("/"):
        return True
    if "/" not in exclusion:
        return False
    prefix = normalize_path(exclusion)
    return rel_path == prefix or rel_path.startswith(prefix + "/")
