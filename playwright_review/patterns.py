"""Pattern library: the fixed catalog of line checks and positive signals.

Each LineCheck pairs a matcher with severity/message/suggestion text. A matcher
takes one line and returns the template fields for the description (an empty
dict when the template has no placeholders), or None when the line is clean.
Matchers are total over any ``str``: empty or garbage input simply yields None.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .enums import Severity

Matcher = Callable[[str], dict[str, str] | None]


@dataclass(frozen=True)
class LineCheck:
    rule: str
    severity: Severity
    matcher: Matcher
    description: str  # str.format template filled from the matcher's fields
    suggestion: str

    def describe(self, fields: dict[str, str]) -> str:
        return self.description.format(**fields)


@dataclass(frozen=True)
class PositiveCheck:
    pattern: str  # plain substring
    description: str


# ── Comment detection ────────────────────────────────────────

COMMENT_PREFIXES = ("//", "#", "/*", "*")


def is_comment_line(line: str) -> bool:
    return line.strip().startswith(COMMENT_PREFIXES)


# ── Generic anti-pattern matchers ────────────────────────────

_LOCATOR_CALL_MARKERS = ("page.locator(", "$(")
_QUOTED_LOCATOR_RE = re.compile(r"""(?:page\.locator|\$)\(\s*['"`]([^'"`]+)['"`]""")


def _is_raw_css_selector(selector: str) -> bool:
    return selector.startswith((".", "#")) or " > " in selector


def match_bad_locator(line: str) -> dict[str, str] | None:
    if not any(marker in line for marker in _LOCATOR_CALL_MARKERS):
        return None
    m = _QUOTED_LOCATOR_RE.search(line)
    if m and _is_raw_css_selector(m.group(1)):
        return {"selector": m.group(1)}
    return None


def match_wait_for_timeout(line: str) -> dict[str, str] | None:
    return {} if "waitForTimeout(" in line else None


def match_weak_visibility(line: str) -> dict[str, str] | None:
    if "expect(await " in line and ".isVisible()" in line:
        return {}
    return None


AWAITED_ACTIONS = ("click", "fill", "press", "type", "hover", "focus")
_ACTION_CALL_RES = tuple(
    (action, re.compile(r"\." + action + r"\(")) for action in AWAITED_ACTIONS
)


def match_missing_await(line: str) -> dict[str, str] | None:
    """First action call (in AWAITED_ACTIONS order) on a line without ``await``."""
    if "await " in line:
        return None
    for action, pattern in _ACTION_CALL_RES:
        if pattern.search(line):
            return {"action": action}
    return None


_ANY_TYPE_RE = re.compile(r":\s*any\b|<any>|\bas\s+any\b")


def match_any_type(line: str) -> dict[str, str] | None:
    return {} if _ANY_TYPE_RE.search(line) else None


# ── XPath vs. comment disambiguation ─────────────────────────
#
# A bare "//" is either an XPath expression or a trailing comment. Each
# predicate below recognizes one comment shape; if any fires the line is
# treated as "not XPath". Misses are preferred over flagging comments.

COMMENT_SHAPES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("starts_with_slashes", lambda line: line.strip().startswith("//")),
    ("spaced_inline_comment", lambda line: "// " in line),
    ("word_slashes_word", lambda line: re.search(r"\w+//\w+", line) is not None),
    ("word_spaced_slashes_word", lambda line: re.search(r"\w+\s*//\s*\w+", line) is not None),
    ("slashes_then_letter", lambda line: re.search(r"//\s*[a-zA-Z]", line) is not None),
    ("slashes_then_digit", lambda line: re.search(r"//\d", line) is not None),
    ("slashes_then_call", lambda line: re.search(r"//[a-zA-Z0-9_-]+\(", line) is not None),
)


def looks_like_comment(line: str) -> bool:
    return any(predicate(line) for _, predicate in COMMENT_SHAPES)


def is_url_line(line: str) -> bool:
    return "http" in line  # covers https too


def has_xpath_call(line: str) -> bool:
    return "xpath(" in line or "xpath=" in line


def has_xpath_expression(line: str) -> bool:
    return "//" in line and not is_url_line(line) and not looks_like_comment(line)


def match_xpath(line: str) -> dict[str, str] | None:
    return {} if has_xpath_call(line) or has_xpath_expression(line) else None


# ── Catalog ──────────────────────────────────────────────────

CSS_LOCATOR_SUGGESTION = "Use page.getByRole() or page.getByTestId() instead"

GENERIC_CHECKS: tuple[LineCheck, ...] = (
    LineCheck(
        "bad_locator", Severity.HIGH, match_bad_locator,
        'Bad CSS selector: "{selector}"',
        CSS_LOCATOR_SUGGESTION,
    ),
    LineCheck(
        "wait_for_timeout", Severity.HIGH, match_wait_for_timeout,
        "Using waitForTimeout - makes tests flaky",
        "Use web-first assertions like expect(locator).toBeVisible()",
    ),
    LineCheck(
        "weak_visibility_assertion", Severity.MEDIUM, match_weak_visibility,
        "Using isVisible() in assertion",
        "Use expect(locator).toBeVisible() for web-first assertion",
    ),
    LineCheck(
        "missing_await", Severity.HIGH, match_missing_await,
        "Missing await on {action} action",
        "Add await before the action",
    ),
    LineCheck(
        "any_type", Severity.MEDIUM, match_any_type,
        "Using any type",
        "Use proper Playwright types like Locator, Page, etc.",
    ),
    LineCheck(
        "xpath", Severity.MEDIUM, match_xpath,
        "Using XPath selector",
        "Prefer getByRole() or getByTestId() for better stability",
    ),
)

POSITIVE_CHECKS: tuple[PositiveCheck, ...] = (
    PositiveCheck("page.getByRole(", "Using getByRole() for accessible locators"),
    PositiveCheck("expect.soft(", "Using soft assertions for multiple checks"),
    PositiveCheck("readonly ", "Using readonly properties for locators"),
)


# ── Test-spec layer rules ────────────────────────────────────

LOCATOR_PATTERNS = tuple(re.compile(p) for p in (
    r"\.locator\(",
    r"\blocator\(",
    r"\$\$?\(",
    r"xpath\(",
    r"\.getByRole\(",
    r"\.getByText\(",
    r"\.getByLabel\(",
    r"\.getByPlaceholder\(",
    r"\.getByTestId\(",
    r"\.getByAltText\(",
    r"\.getByTitle\(",
))

ACTION_PATTERNS = tuple(re.compile(r"\." + name + r"\(") for name in (
    "click", "fill", "type", "press", "hover", "focus", "blur",
    "check", "uncheck", "selectOption", "clear", "dragAndDrop",
    "doubleClick", "rightClick", "tap", "swipe", "scroll",
    "waitFor", "waitForSelector", "waitForFunction",
    "goto", "reload", "goBack", "goForward", "screenshot", "pdf",
))

ASSERTION_PATTERNS = (
    re.compile(r"expect\("),
    re.compile(r"expect\.soft\("),
)


@dataclass(frozen=True)
class LayerRule:
    """A test-spec rule: any pattern hit records one issue for the line."""

    rule: str
    patterns: tuple[re.Pattern, ...]
    description: str
    suggestion: str
    severity: Severity = Severity.HIGH

    def matches(self, line: str) -> bool:
        return any(p.search(line) for p in self.patterns)


TEST_SPEC_RULES: tuple[LayerRule, ...] = (
    LayerRule(
        "locator_in_test", LOCATOR_PATTERNS,
        "Locator found in test file",
        "Move locators to Page Object layer in /pages directory. "
        "Test files should only call Page Object methods.",
    ),
    LayerRule(
        "action_in_test", ACTION_PATTERNS,
        "Action found in test file",
        "Move actions to Page Object layer in /pages directory. "
        "Test files should only call reusable Page Object methods.",
    ),
    LayerRule(
        "assertion_in_test", ASSERTION_PATTERNS,
        "Expect assertion found in test file",
        "Move assertions to validator functions in /validators directory. "
        "Test files should only call validator functions.",
    ),
)


# ── Whole-file patterns ──────────────────────────────────────

ASSERTION_CALL_RE = re.compile(r"expect(?:\.soft)?\(")
TEST_DECLARATION_RE = re.compile(r"\btest\(")
BEFORE_EACH_RE = re.compile(r"\bbeforeEach\(")
PER_TEST_CONFIG_MARKER = "test.use"
