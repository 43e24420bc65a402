"""Base rule class for all .bru lint rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from brulint.core.config import LintConfig
from brulint.core.models import Classification, Diagnostic, Severity
from brulint.scanner.blocks import BruDocument


@dataclass(frozen=True)
class RuleContext:
    """Per-file facts shared by every rule: where the file lives and what it is."""

    file: str
    classification: Classification
    config: LintConfig = field(default_factory=LintConfig)

    @property
    def name(self) -> str:
        return PurePosixPath(self.file).name

    @property
    def stem(self) -> str:
        name = self.name
        return name[: -len(".bru")] if name.endswith(".bru") else name


class BaseRule(ABC):
    """Abstract base class for all rules.

    A rule is a pure predicate over a document and its context. Rules never
    look at other rules' diagnostics.
    """

    code: str = ""
    severity: Severity = Severity.WARN
    fixable: bool = False
    description: str = ""

    @abstractmethod
    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        """Run the rule on a single file. Return list of diagnostics."""
        ...

    def _make_diagnostic(
        self,
        message: str,
        ctx: RuleContext,
        severity: Severity | None = None,
    ) -> Diagnostic:
        """Helper to create a Diagnostic with this rule's defaults."""
        return Diagnostic(
            file=ctx.file,
            severity=severity or self.severity,
            message=message,
            code=self.code or None,
        )
