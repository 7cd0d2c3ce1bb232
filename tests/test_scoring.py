"""Tests for playwright_review.scoring — the bounded 10-point file score."""

from __future__ import annotations

import pytest

from playwright_review.enums import Severity
from playwright_review.models import Issue, PositiveSignal
from playwright_review.roles import Role
from playwright_review.scoring import MAX_SCORE, build_report, compute_score


def _issue(severity: Severity, line: int = 1) -> Issue:
    return Issue(
        rule="any_type",
        severity=severity,
        description="d",
        line=line,
        suggestion="s",
    )


# ===================================================================
# compute_score
# ===================================================================

class TestComputeScore:
    def test_no_issues_is_perfect(self):
        assert compute_score([]) == MAX_SCORE == 10

    @pytest.mark.parametrize("high, medium, expected", [
        (1, 0, 7),
        (0, 1, 9),
        (2, 0, 4),
        (1, 2, 5),
        (3, 1, 0),
        (4, 0, 0),
        (0, 10, 0),
        (0, 25, 0),
    ])
    def test_penalties(self, high, medium, expected):
        issues = [_issue(Severity.HIGH)] * high + [_issue(Severity.MEDIUM)] * medium
        assert compute_score(issues) == expected

    def test_monotonically_non_increasing(self):
        issues: list[Issue] = []
        previous = compute_score(issues)
        for i in range(12):
            issues.append(_issue(Severity.HIGH if i % 3 == 0 else Severity.MEDIUM, i))
            score = compute_score(issues)
            assert 0 <= score <= previous <= MAX_SCORE
            previous = score

    def test_accepts_any_iterable(self):
        assert compute_score(_issue(Severity.HIGH) for _ in range(2)) == 4


# ===================================================================
# build_report
# ===================================================================

class TestBuildReport:
    def test_report_is_frozen_and_scored(self):
        report = build_report(
            "tests/a.spec.ts",
            Role.TEST_SPEC,
            [_issue(Severity.HIGH), _issue(Severity.MEDIUM)],
            [PositiveSignal("ok", 0)],
        )
        assert report.score == 6
        assert isinstance(report.issues, tuple)
        assert isinstance(report.positives, tuple)
        assert report.count(Severity.HIGH) == 1
        with pytest.raises(AttributeError):
            report.score = 10

    def test_generator_issues_consumed_once(self):
        report = build_report("a.ts", Role.OTHER, (_issue(Severity.HIGH) for _ in range(1)), [])
        assert len(report.issues) == 1
        assert report.score == 7
