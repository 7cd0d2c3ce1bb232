"""Console and JSON rendering of review results."""

from __future__ import annotations

import json

from .enums import Severity
from .models import FileOutcome, FileReport, ReadFailure, RunSummary
from .scoring import MAX_SCORE
from .utils import colorize

SEVERITY_ICONS = {Severity.HIGH: "🚨", Severity.MEDIUM: "⚠️"}
SEVERITY_COLORS = {Severity.HIGH: "red", Severity.MEDIUM: "yellow"}


def _score_color(score: int) -> str:
    if score >= 8:
        return "green"
    if score >= 5:
        return "yellow"
    return "red"


def print_banner(file_count: int):
    print(f"🔍 Reviewing {file_count} Playwright test files...\n")


def print_no_files():
    print("🔍 No Playwright test files found.")


def print_read_failure(failure: ReadFailure):
    print(f"## File: {failure.path}")
    print("---")
    print(colorize(f"❌ Error reading file: {failure.message}\n", "red"))


def print_file_report(report: FileReport):
    print(f"## File: {report.path}")
    print("---")
    print(colorize(f"Role: {report.role.value}", "dim"))

    if report.issues:
        print(colorize("\n### Issues Found:", "bold"))
        for issue in report.issues:
            severity = Severity(issue.severity)
            icon = SEVERITY_ICONS.get(severity, "ℹ️")
            tag = colorize(f"[{severity}]", SEVERITY_COLORS.get(severity, "dim"))
            print(f"- {icon} {tag} {issue.description} (line {issue.line})")
            if issue.suggestion:
                print(f"  💡 Suggestion: {issue.suggestion}")

    if report.positives:
        print(colorize("\n### Positive Aspects:", "bold"))
        for pos in report.positives:
            print(f"✅ {pos.description} (line {pos.line})")

    score = colorize(f"{report.score}/{MAX_SCORE}", _score_color(report.score))
    print(f"\n### Overall Score: {score}\n")


def print_outcome(outcome: FileOutcome):
    if isinstance(outcome, ReadFailure):
        print_read_failure(outcome)
    else:
        print_file_report(outcome)


def print_summary(summary: RunSummary):
    print(colorize("📊 Review Summary", "bold"))
    print("================")
    reviewed = len(summary.reports)
    line = f"Run completed. Reviewed {reviewed} file{'s' if reviewed != 1 else ''}"
    if summary.failures:
        line += f", {len(summary.failures)} unreadable"
    print(line + ".")
    if summary.reports:
        totals = ", ".join(
            f"{sum(r.count(sev) for r in summary.reports)} {sev}" for sev in Severity
        )
        print(f"Issues: {totals}.")
    if summary.lowest_score is not None:
        print(f"Lowest score: {summary.lowest_score}/{MAX_SCORE}. "
              "Check individual file scores above.")


def print_run(summary: RunSummary):
    """Full console report: banner, every file in order, then the summary."""
    print_banner(len(summary.outcomes))
    for outcome in summary.outcomes:
        print_outcome(outcome)
    print_summary(summary)


def print_json(summary: RunSummary):
    print(json.dumps(summary.to_dict(), indent=2))


__all__ = [
    "print_file_report",
    "print_json",
    "print_no_files",
    "print_outcome",
    "print_read_failure",
    "print_run",
    "print_summary",
]
