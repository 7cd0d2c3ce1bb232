"""File scoring: a 10-point scale reduced by issue severity."""

from __future__ import annotations

from collections.abc import Iterable

from .enums import SEVERITY_PENALTIES, Severity
from .models import FileReport, Issue, PositiveSignal
from .roles import Role

MAX_SCORE = 10
MIN_SCORE = 0


def compute_score(issues: Iterable[Issue]) -> int:
    """10 minus 3 per HIGH and 1 per MEDIUM issue, floored at 0."""
    penalty = sum(SEVERITY_PENALTIES[Severity(issue.severity)] for issue in issues)
    return max(MIN_SCORE, MAX_SCORE - penalty)


def build_report(
    path: str,
    role: Role,
    issues: Iterable[Issue],
    positives: Iterable[PositiveSignal],
) -> FileReport:
    """Freeze a file's findings into a scored FileReport."""
    issues = tuple(issues)
    return FileReport(
        path=path,
        role=role,
        issues=issues,
        positives=tuple(positives),
        score=compute_score(issues),
    )


__all__ = ["MAX_SCORE", "MIN_SCORE", "build_report", "compute_score"]
