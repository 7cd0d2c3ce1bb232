"""Result types produced by a review run.

Every value here is frozen: a file review builds its issue and positive lists
locally, then hands them over as tuples inside a FileReport.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Severity
from .roles import Role


@dataclass(frozen=True)
class Issue:
    """A single rule violation. ``line`` is 0 for whole-file issues."""

    rule: str
    severity: Severity
    description: str
    line: int
    suggestion: str

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "severity": str(self.severity),
            "description": self.description,
            "line": self.line,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class PositiveSignal:
    description: str
    line: int

    def to_dict(self) -> dict[str, object]:
        return {"description": self.description, "line": self.line}


@dataclass(frozen=True)
class FileReport:
    path: str
    role: Role
    issues: tuple[Issue, ...]
    positives: tuple[PositiveSignal, ...]
    score: int

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "role": self.role.value,
            "score": self.score,
            "counts": {str(sev): self.count(sev) for sev in Severity},
            "issues": [issue.to_dict() for issue in self.issues],
            "positives": [pos.to_dict() for pos in self.positives],
        }


@dataclass(frozen=True)
class ReadFailure:
    """A file that could not be read; the run skips it and carries on."""

    path: str
    message: str

    def to_dict(self) -> dict[str, object]:
        return {"path": self.path, "error": self.message}


FileOutcome = FileReport | ReadFailure


@dataclass(frozen=True)
class RunSummary:
    """Per-file outcomes of one run, in file-processing order."""

    outcomes: tuple[FileOutcome, ...] = ()

    @property
    def reports(self) -> list[FileReport]:
        return [o for o in self.outcomes if isinstance(o, FileReport)]

    @property
    def failures(self) -> list[ReadFailure]:
        return [o for o in self.outcomes if isinstance(o, ReadFailure)]

    @property
    def lowest_score(self) -> int | None:
        scores = [r.score for r in self.reports]
        return min(scores) if scores else None

    def files_below(self, threshold: int) -> list[FileReport]:
        """Reports scoring strictly below *threshold*."""
        return [r for r in self.reports if r.score < threshold]

    def to_dict(self) -> dict[str, object]:
        return {
            "files": [o.to_dict() for o in self.outcomes],
            "reviewed": len(self.reports),
            "failed": len(self.failures),
            "lowest_score": self.lowest_score,
        }


__all__ = [
    "FileOutcome",
    "FileReport",
    "Issue",
    "PositiveSignal",
    "ReadFailure",
    "RunSummary",
]
