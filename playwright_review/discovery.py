"""Test file discovery: walk a target directory for Playwright test files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .fallbacks import log_best_effort_failure
from .utils import DEFAULT_EXCLUSIONS, matches_exclusion, normalize_path

logger = logging.getLogger(__name__)

TS_TEST_SUFFIXES = (".spec.ts", ".test.ts")
JS_TEST_SUFFIXES = (".spec.js", ".test.js")


def suffixes_for(include_js: bool = False) -> tuple[str, ...]:
    return TS_TEST_SUFFIXES + JS_TEST_SUFFIXES if include_js else TS_TEST_SUFFIXES


def _is_excluded_dir(name: str, rel_path: str, extra: tuple[str, ...]) -> bool:
    if name in DEFAULT_EXCLUSIONS:
        return True
    return any(matches_exclusion(rel_path, ex) or ex == name for ex in extra)


def _walk(root: str, suffixes: tuple[str, ...], extra: tuple[str, ...]) -> list[str]:
    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        rel_dir = os.path.relpath(dirpath, root).replace("\\", "/")
        # Prune in place so os.walk never descends into excluded directories.
        dirnames[:] = sorted(
            d for d in dirnames
            if not _is_excluded_dir(d, normalize_path(f"{rel_dir}/{d}"), extra)
        )
        for fname in filenames:
            if not fname.endswith(suffixes):
                continue
            rel_file = normalize_path(f"{rel_dir}/{fname}")
            if extra and any(matches_exclusion(rel_file, ex) for ex in extra):
                continue
            files.append(normalize_path(os.path.join(dirpath, fname)))
    return sorted(files)


def _log_walk_error(exc: OSError) -> None:
    log_best_effort_failure(logger, "walk directory", exc)


def find_test_files(
    target: str | Path = ".",
    include_js: bool = False,
    exclusions: Iterable[str] = (),
) -> list[str]:
    """Return the test files to review under *target*, sorted.

    A file target is returned as-is, whatever its name. A missing target
    yields an empty list; unreadable subdirectories are skipped.
    """
    target = str(target)
    try:
        if not os.path.isdir(target):
            os.stat(target)
            return [target]
        return _walk(target, suffixes_for(include_js), tuple(exclusions))
    except OSError as exc:
        log_best_effort_failure(logger, f"discover test files under {target}", exc)
        return []


__all__ = ["JS_TEST_SUFFIXES", "TS_TEST_SUFFIXES", "find_test_files", "suffixes_for"]
