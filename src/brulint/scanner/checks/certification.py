"""Checks for read-only certification ("Check ...") scenarios (D001, C001)."""

from __future__ import annotations

import re

from brulint.core.models import Diagnostic, Severity
from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks.base import BaseRule, RuleContext
from brulint.scanner.classifier import MUTATING_VERBS

MUTATING_BLOCK_RE = re.compile(
    r"^\s*(" + "|".join(MUTATING_VERBS) + r")\s*{", re.MULTILINE
)


class D001HardcodedDescriptor(BaseRule):
    """Descriptor URIs in certification scenarios must be resolved at runtime."""

    code = "D001"
    severity = Severity.ERROR
    description = "Hardcoded descriptor URI"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if not ctx.classification.is_check_scenario:
            return []
        if ctx.config.descriptor_prefix not in doc.text:
            return []
        return [self._make_diagnostic(
            "Hardcoded descriptor URI found in a validation file (should rely on dynamic values)",
            ctx,
        )]


class C001MutatingVerbInCheck(BaseRule):
    """Certification scenarios are read-only."""

    code = "C001"
    severity = Severity.ERROR
    description = "Mutating HTTP verb in certification file"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if not ctx.classification.is_check_scenario:
            return []
        if not MUTATING_BLOCK_RE.search(doc.text):
            return []
        return [self._make_diagnostic("Mutating HTTP verb found in read-only certification file", ctx)]
