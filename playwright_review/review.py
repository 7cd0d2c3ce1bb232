"""Review pipeline: role detection, line passes, whole-file checks, scoring.

Each file review is self-contained. Nothing is carried from one file to the
next, so a batch can be reviewed on a thread pool without coordination
beyond keeping results in input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .architecture import check_file_structure, check_layer_rules
from .classifier import LineContext, classify_line
from .models import FileOutcome, FileReport, Issue, PositiveSignal, ReadFailure, RunSummary
from .roles import Role, detect_role, is_page_object_path
from .scoring import build_report

logger = logging.getLogger(__name__)


def review_content(path: str, content: str) -> FileReport:
    """Review already-loaded file content. Pure: same input, same report."""
    role = detect_role(path)
    context = LineContext(
        is_test_file=role is Role.TEST_SPEC,
        is_page_object_file=is_page_object_path(path),
    )
    lines = content.split("\n")  # physical lines only; CRLF leaves a trailing \r

    issues: list[Issue] = []
    positives: list[PositiveSignal] = []

    for i, line in enumerate(lines, 1):
        findings = classify_line(line, i, context)
        issues.extend(findings.issues)
        positives.extend(findings.positives)

    issues.extend(check_layer_rules(role, lines))

    file_issues, file_positives = check_file_structure(path, content)
    issues.extend(file_issues)
    positives.extend(file_positives)

    return build_report(path, role, issues, positives)


def read_source(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def review_file(path: str) -> FileOutcome:
    """Read and review one file. Read errors become a ReadFailure, never raise."""
    try:
        content = read_source(path)
    except OSError as exc:
        logger.debug("Skipping unreadable file %s (%s)", path, exc)
        return ReadFailure(path=path, message=str(exc))
    return review_content(path, content)


def review_files(paths: Iterable[str], *, jobs: int = 1) -> RunSummary:
    """Review files in order. ``jobs > 1`` reviews them on a thread pool."""
    paths = list(paths)
    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            outcomes = tuple(executor.map(review_file, paths))
    else:
        outcomes = tuple(review_file(p) for p in paths)
    return RunSummary(outcomes=outcomes)


__all__ = ["read_source", "review_content", "review_file", "review_files"]
