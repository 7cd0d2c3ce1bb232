"""Role classification — which architectural layer a file belongs to.

A Playwright suite is split into three layers:

  tests/       *.spec.ts files that only orchestrate page-object methods and
               validator calls
  pages/       page objects exposing locators and actions
  validators/  assertion helpers, decoupled from locators and test declarations

Roles are derived purely from the path string. All path-substring checks for
roles live here; rule code asks this module instead of inspecting paths.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import PurePath


class Role(str, Enum):
    """Architectural role of a file — determines which rule sets apply."""
    TEST_SPEC = "test-spec"
    PAGE_OBJECT = "page-object"
    VALIDATOR = "validator"  # Directory convention only; detect_role reports these as OTHER.
    OTHER = "other"


TEST_DIR_SEGMENT = "tests"
TEST_SPEC_SUFFIXES = (".spec.ts",)
PAGE_OBJECT_TOKEN = "page"
VALIDATOR_DIR_SEGMENT = "validators"


def _has_segment(path: str, segment: str) -> bool:
    return segment in PurePath(path.replace("\\", "/")).parts[:-1]


def is_test_spec_path(path: str) -> bool:
    """True for ``*.spec.ts`` files under a ``tests`` directory.

    Callers pass relative or absolute paths, so both the path as given and its
    resolved form are tried.
    """
    if not path.endswith(TEST_SPEC_SUFFIXES):
        return False
    if _has_segment(path, TEST_DIR_SEGMENT):
        return True
    return _has_segment(os.path.abspath(path), TEST_DIR_SEGMENT)


def is_validator_path(path: str) -> bool:
    return _has_segment(path, VALIDATOR_DIR_SEGMENT)


def is_page_object_path(path: str) -> bool:
    """True when the path or filename mentions "page" (any case).

    Validator files are excluded even when their name mentions a page
    (``validators/homePageChecks.ts``).
    """
    if is_validator_path(path):
        return False
    return PAGE_OBJECT_TOKEN in path.lower()


def detect_role(path: str) -> Role:
    """Classify a file path. Precedence: test spec, page object, other."""
    if is_test_spec_path(path):
        return Role.TEST_SPEC
    if is_page_object_path(path):
        return Role.PAGE_OBJECT
    return Role.OTHER


__all__ = [
    "Role",
    "detect_role",
    "is_page_object_path",
    "is_test_spec_path",
    "is_validator_path",
]
