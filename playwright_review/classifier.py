"""Line classifier: generic anti-pattern pass over a single line."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Issue, PositiveSignal
from .patterns import GENERIC_CHECKS, POSITIVE_CHECKS, is_comment_line


@dataclass(frozen=True)
class LineContext:
    """What the classifier needs to know about the file a line came from."""

    is_test_file: bool = False
    is_page_object_file: bool = False

    @property
    def records_positives(self) -> bool:
        # Good practices only count outside test specs, except in page-like files.
        return not self.is_test_file or self.is_page_object_file


@dataclass(frozen=True)
class LineFindings:
    issues: tuple[Issue, ...] = ()
    positives: tuple[PositiveSignal, ...] = ()


EMPTY_FINDINGS = LineFindings()


def classify_line(line: str, line_number: int, context: LineContext) -> LineFindings:
    """Run every generic check against one line.

    Comment lines produce nothing at all. Otherwise each check contributes at
    most one issue, so a line never carries two issues of the same rule.
    """
    if is_comment_line(line):
        return EMPTY_FINDINGS

    issues = []
    for check in GENERIC_CHECKS:
        fields = check.matcher(line)
        if fields is None:
            continue
        issues.append(Issue(
            rule=check.rule,
            severity=check.severity,
            description=check.describe(fields),
            line=line_number,
            suggestion=check.suggestion,
        ))

    positives = []
    if context.records_positives:
        positives = [
            PositiveSignal(pos.description, line_number)
            for pos in POSITIVE_CHECKS
            if pos.pattern in line
        ]

    return LineFindings(tuple(issues), tuple(positives))


__all__ = ["EMPTY_FINDINGS", "LineContext", "LineFindings", "classify_line"]
