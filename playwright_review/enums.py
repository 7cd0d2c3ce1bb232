"""Canonical enums for issue attributes.

StrEnum values compare equal to their string values (Severity.HIGH == "HIGH"),
so rendered output and JSON payloads can use them directly.
"""

from __future__ import annotations

import enum


class Severity(enum.StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"


# Points subtracted from the 10-point file score per issue.
SEVERITY_PENALTIES = {Severity.HIGH: 3, Severity.MEDIUM: 1}
