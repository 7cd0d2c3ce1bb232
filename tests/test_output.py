"""Tests for playwright_review.output — console and JSON rendering."""

import json

from playwright_review.enums import Severity
from playwright_review.models import FileReport, Issue, PositiveSignal, ReadFailure, RunSummary
from playwright_review.output import (
    print_file_report,
    print_json,
    print_no_files,
    print_run,
    print_summary,
)
from playwright_review.roles import Role


def _report(path="tests/a.spec.ts", score=6, issues=None, positives=()):
    if issues is None:
        issues = (
            Issue("wait_for_timeout", Severity.HIGH, "Using waitForTimeout - makes tests flaky",
                  4, "Use web-first assertions like expect(locator).toBeVisible()"),
            Issue("any_type", Severity.MEDIUM, "Using any type", 9,
                  "Use proper Playwright types like Locator, Page, etc."),
        )
    return FileReport(path, Role.TEST_SPEC, tuple(issues), tuple(positives), score)


def test_file_report_layout(capsys):
    print_file_report(_report())
    out = capsys.readouterr().out
    assert out.startswith("## File: tests/a.spec.ts\n---\n")
    assert "Role: test-spec" in out
    assert "- 🚨 [HIGH] Using waitForTimeout - makes tests flaky (line 4)" in out
    assert "  💡 Suggestion: Use web-first assertions" in out
    assert "- ⚠️ [MEDIUM] Using any type (line 9)" in out
    assert "### Positive Aspects:" not in out
    assert "### Overall Score: 6/10" in out


def test_issues_listed_before_positives(capsys):
    report = _report(positives=[PositiveSignal("Using readonly properties for locators", 2)])
    print_file_report(report)
    out = capsys.readouterr().out
    assert out.index("### Issues Found:") < out.index("### Positive Aspects:")
    assert "✅ Using readonly properties for locators (line 2)" in out


def test_clean_report_has_no_issue_section(capsys):
    print_file_report(_report(score=10, issues=()))
    out = capsys.readouterr().out
    assert "### Issues Found:" not in out
    assert "### Overall Score: 10/10" in out


def test_run_keeps_file_order_and_reports_failures(capsys):
    summary = RunSummary((
        _report("tests/b.spec.ts", score=3),
        ReadFailure("tests/gone.spec.ts", "No such file or directory"),
        _report("tests/a.spec.ts", score=8, issues=()),
    ))
    print_run(summary)
    out = capsys.readouterr().out
    assert out.startswith("🔍 Reviewing 3 Playwright test files...")
    assert out.index("tests/b.spec.ts") < out.index("tests/gone.spec.ts") < out.index("tests/a.spec.ts")
    assert "❌ Error reading file: No such file or directory" in out
    assert "Run completed. Reviewed 2 files, 1 unreadable." in out
    assert "Lowest score: 3/10." in out
    assert "Issues: 1 HIGH, 1 MEDIUM." in out


def test_summary_singular(capsys):
    print_summary(RunSummary((_report(),)))
    assert "Reviewed 1 file." in capsys.readouterr().out


def test_no_files_message(capsys):
    print_no_files()
    assert capsys.readouterr().out.strip() == "🔍 No Playwright test files found."


def test_json_shape(capsys):
    print_json(RunSummary((_report(), ReadFailure("x.spec.ts", "denied"))))
    data = json.loads(capsys.readouterr().out)
    assert data["reviewed"] == 1
    assert data["failed"] == 1
    assert data["lowest_score"] == 6
    first, second = data["files"]
    assert first["counts"] == {"HIGH": 1, "MEDIUM": 1}
    assert first["issues"][0] == {
        "rule": "wait_for_timeout",
        "severity": "HIGH",
        "description": "Using waitForTimeout - makes tests flaky",
        "line": 4,
        "suggestion": "Use web-first assertions like expect(locator).toBeVisible()",
    }
    assert second == {"path": "x.spec.ts", "error": "denied"}
