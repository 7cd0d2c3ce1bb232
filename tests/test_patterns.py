"""Tests for playwright_review.patterns — matchers and comment/XPath predicates."""

import pytest

from playwright_review.patterns import (
    COMMENT_SHAPES,
    GENERIC_CHECKS,
    TEST_SPEC_RULES,
    has_xpath_expression,
    is_comment_line,
    looks_like_comment,
    match_any_type,
    match_bad_locator,
    match_missing_await,
    match_weak_visibility,
    match_xpath,
)

# ── is_comment_line ──────────────────────────────────────────


@pytest.mark.parametrize("line", [
    "// await page.click('#x')",
    "   // indented",
    "# shell style",
    "/* block start",
    " * block body",
    "*/",
])
def test_comment_lines(line):
    assert is_comment_line(line)


@pytest.mark.parametrize("line", [
    "await page.click('#x'); // trailing",
    "const a = 1;",
    "",
    "   ",
])
def test_non_comment_lines(line):
    assert not is_comment_line(line)


# ── bad locator ──────────────────────────────────────────────


def test_bad_locator_class_selector():
    assert match_bad_locator("const x = page.locator('.btn-primary');") == {
        "selector": ".btn-primary"
    }


def test_bad_locator_id_and_descendant():
    assert match_bad_locator('page.locator("#login")') == {"selector": "#login"}
    assert match_bad_locator("page.locator(`form > button`)") == {"selector": "form > button"}


def test_bad_locator_dollar_call():
    assert match_bad_locator("const rows = await page.$('.row');") == {"selector": ".row"}


def test_bad_locator_ignores_semantic_selectors():
    assert match_bad_locator("page.locator('text=Hello World')") is None
    assert match_bad_locator("page.locator('[data-testid=save]')") is None


def test_bad_locator_needs_quoted_argument():
    """A variable argument cannot be judged, so nothing fires."""
    assert match_bad_locator("page.locator(selector)") is None


# ── missing await ────────────────────────────────────────────


def test_missing_await_reports_action():
    assert match_missing_await("page.click('#go')") == {"action": "click"}


def test_missing_await_uses_catalog_order():
    assert match_missing_await("page.fill('#a', 'x').then(() => el.click())") == {
        "action": "click"
    }


def test_missing_await_satisfied_anywhere_on_line():
    assert match_missing_await("const p = Promise.all([await page.click('#a')])") is None


def test_missing_await_ignores_method_declarations():
    assert match_missing_await("  async click() {") is None


@pytest.mark.parametrize("line", [
    "page.dblclick('#row')",
    "click(submitButton)",
    "fill(input, 'x')",
    "helpers.doubleClick(cell)",
    "page.typeText('x')",
])
def test_missing_await_only_counts_exact_method_calls(line):
    """Bare helper calls and longer verbs such as dblclick are not flagged."""
    assert match_missing_await(line) is None


def test_missing_await_method_call_after_bare_call():
    assert match_missing_await("click(a); page.fill('#b', 'x')") == {"action": "fill"}


# ── other generic matchers ───────────────────────────────────


def test_weak_visibility_needs_both_parts():
    assert match_weak_visibility("expect(await button.isVisible()).toBe(true)") == {}
    assert match_weak_visibility("expect(button).toBeVisible()") is None


@pytest.mark.parametrize("line", [
    "function go(page: any) {",
    "const items = <any>data;",
    "const el = handle as any;",
])
def test_any_type_forms(line):
    assert match_any_type(line) == {}


def test_any_type_does_not_match_identifiers():
    assert match_any_type("const company: Company = build();") is None


# ── XPath vs comments ────────────────────────────────────────


def test_comment_shapes_are_named_and_ordered():
    names = [name for name, _ in COMMENT_SHAPES]
    assert names[0] == "starts_with_slashes"
    assert len(names) == len(set(names)) == 7


@pytest.mark.parametrize("line", [
    "const x = 1; // set x",
    "foo();//comment",
    "a = b //7166",
    "call()//helper()",
    "total = a//b",
])
def test_trailing_comments_are_not_xpath(line):
    assert looks_like_comment(line)
    assert not has_xpath_expression(line)


def test_xpath_expression_detected():
    assert match_xpath("const el = page.locator('//*[@id=\"main\"]');") == {}


def test_explicit_xpath_calls():
    assert match_xpath("const el = xpath('//div');") == {}
    assert match_xpath("page.locator('xpath=//button')") == {}


@pytest.mark.parametrize("line", [
    "await page.goto('https://example.com//*[weird]');",
    "const api = 'http://localhost:3000//*';",
])
def test_urls_never_fire_xpath_substring_rule(line):
    assert not has_xpath_expression(line)
    assert match_xpath(line) is None


# ── catalog shape ────────────────────────────────────────────


def test_generic_rule_ids_unique():
    rules = [check.rule for check in GENERIC_CHECKS]
    assert len(rules) == len(set(rules))


def test_test_spec_rules_cover_locators_actions_assertions():
    assert [r.rule for r in TEST_SPEC_RULES] == [
        "locator_in_test", "action_in_test", "assertion_in_test",
    ]


@pytest.mark.parametrize("line", ["", "\x00\x01\x02", "�" * 40, "((((("])
def test_matchers_total_on_garbage(line):
    for check in GENERIC_CHECKS:
        assert check.matcher(line) is None
    for rule in TEST_SPEC_RULES:
        assert not rule.matches(line)
