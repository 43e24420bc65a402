"""Shared data models used across brulint modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Severity(enum.Enum):
    ERROR = "ERROR"
    WARN = "WARN"


@dataclass(frozen=True)
class Classification:
    """Role of a .bru file, derived once from its path and raw text."""

    is_folder_doc: bool = False
    is_environment: bool = False
    has_http_verb_block: bool = False
    is_check_scenario: bool = False

    @property
    def is_request_file(self) -> bool:
        return self.has_http_verb_block and not self.is_folder_doc and not self.is_environment


@dataclass(frozen=True)
class Diagnostic:
    """A single problem reported for a request file."""

    file: str
    severity: Severity
    message: str
    code: str | None = None

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "level": self.severity.value,
            "code": self.code,
            "message": self.message,
        }


@dataclass(frozen=True)
class FixRecord:
    """A fix transform that was applied to a file."""

    file: str
    code: str


@dataclass
class FileResult:
    """Outcome of evaluating one file."""

    file: str
    classification: Classification
    original_text: str
    text: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixes: list[FixRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.text != self.original_text


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counters for a lint run."""

    files_scanned: int = 0
    problems: int = 0
    errors: int = 0
    warnings: int = 0
    fixed: int = 0

    def to_dict(self) -> dict:
        return {
            "filesScanned": self.files_scanned,
            "problems": self.problems,
            "errors": self.errors,
            "warnings": self.warnings,
            "fixed": self.fixed,
        }


@dataclass
class LintReport:
    """Append-only collection of diagnostics and fixes across a whole scan."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixes: list[FixRecord] = field(default_factory=list)
    fixed_files: list[str] = field(default_factory=list)
    files_scanned: int = 0

    def add(self, result: FileResult, written: bool = False) -> None:
        """Record one file's outcome. ``written`` marks a file persisted to disk."""
        self.files_scanned += 1
        self.diagnostics.extend(result.diagnostics)
        self.fixes.extend(result.fixes)
        if written:
            self.fixed_files.append(result.file)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARN)

    @property
    def outstanding_errors(self) -> list[Diagnostic]:
        """ERROR diagnostics that no applied fix has resolved."""
        fixed = {(f.file, f.code) for f in self.fixes}
        return [
            d for d in self.diagnostics
            if d.severity == Severity.ERROR and (d.file, d.code) not in fixed
        ]

    @property
    def summary(self) -> RunSummary:
        return RunSummary(
            files_scanned=self.files_scanned,
            problems=len(self.diagnostics),
            errors=self.error_count,
            warnings=self.warning_count,
            fixed=len(self.fixed_files),
        )

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "problems": [d.to_dict() for d in self.diagnostics],
            "fixedFiles": list(self.fixed_files),
        }
