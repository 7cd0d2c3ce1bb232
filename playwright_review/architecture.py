"""Architecture rules: layer policy for test specs plus whole-file structure checks.

Test specs must stay declarative: no locators, no actions, no assertions.
Those belong to page objects and validators respectively. Page objects in turn
must not assert.
"""

from __future__ import annotations

from .enums import Severity
from .models import Issue, PositiveSignal
from .patterns import (
    ASSERTION_CALL_RE,
    BEFORE_EACH_RE,
    PER_TEST_CONFIG_MARKER,
    TEST_DECLARATION_RE,
    TEST_SPEC_RULES,
    is_comment_line,
)
from .roles import Role, is_page_object_path

WHOLE_FILE_LINE = 0


def check_test_spec_line(line: str, line_number: int) -> list[Issue]:
    """Apply each test-spec layer rule to one line; one issue per rule at most."""
    trimmed = line.strip()
    if is_comment_line(trimmed):
        return []
    return [
        Issue(
            rule=rule.rule,
            severity=rule.severity,
            description=rule.description,
            line=line_number,
            suggestion=rule.suggestion,
        )
        for rule in TEST_SPEC_RULES
        if rule.matches(trimmed)
    ]


def check_layer_rules(role: Role, lines: list[str]) -> list[Issue]:
    """Line-level layer policy. Only test specs have one."""
    if role is not Role.TEST_SPEC:
        return []
    issues: list[Issue] = []
    for i, line in enumerate(lines, 1):
        issues.extend(check_test_spec_line(line, i))
    return issues


def check_page_object_assertions(path: str, content: str) -> Issue | None:
    if not is_page_object_path(path) or not ASSERTION_CALL_RE.search(content):
        return None
    return Issue(
        rule="page_object_assertions",
        severity=Severity.MEDIUM,
        description="Page Object contains assertions",
        line=WHOLE_FILE_LINE,
        suggestion="Move assertions to validator functions in /validators directory. "
        "Keep Page Objects for locators and actions only.",
    )


def check_test_isolation(content: str) -> PositiveSignal | None:
    """Several tests, no beforeEach and no test.use: tests look independent."""
    test_count = len(TEST_DECLARATION_RE.findall(content))
    before_each_count = len(BEFORE_EACH_RE.findall(content))
    if test_count > 1 and before_each_count == 0 and PER_TEST_CONFIG_MARKER not in content:
        return PositiveSignal("Tests appear to be independent (no shared state)", WHOLE_FILE_LINE)
    return None


def check_file_structure(path: str, content: str) -> tuple[list[Issue], list[PositiveSignal]]:
    """Whole-file checks, reported on line 0."""
    issues = []
    positives = []
    issue = check_page_object_assertions(path, content)
    if issue:
        issues.append(issue)
    positive = check_test_isolation(content)
    if positive:
        positives.append(positive)
    return issues, positives


__all__ = [
    "check_file_structure",
    "check_layer_rules",
    "check_page_object_assertions",
    "check_test_isolation",
    "check_test_spec_line",
]
