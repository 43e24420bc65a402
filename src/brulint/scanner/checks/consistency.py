"""Consistency checks across assertions and scripts (A001, V001, P001)."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from brulint.core.models import Diagnostic, Severity
from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks.base import BaseRule, RuleContext

ARRAY_ASSERT_RE = re.compile(r"res\.body:\s*isArray")
FIELD_ASSERT_RE = re.compile(r"res\.body\.[a-zA-Z0-9_]+:\s*is")
VALIDATE_DEPENDENCY_RE = re.compile(r"validateDependency\(")
VARIABLE_TOKEN_RE = re.compile(r"\{\{[a-zA-Z0-9_]+}}")
PICK_SINGLE_RE = re.compile(r"pickSingle\(", re.IGNORECASE)


def asserts_array_body(doc: BruDocument) -> bool:
    return bool(ARRAY_ASSERT_RE.search(doc.text))


class A001MixedBodyAsserts(BaseRule):
    """The body is either a collection or an object, not both."""

    code = "A001"
    severity = Severity.WARN
    description = "Mixed array/object body assertions"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if asserts_array_body(doc) and FIELD_ASSERT_RE.search(doc.text):
            return [self._make_diagnostic(
                "Assertion mixes array semantics (res.body: isArray) "
                "with direct object field asserts (res.body.id)",
                ctx,
            )]
        return []


class V001DependencyWithoutVariables(BaseRule):
    """validateDependency() is pointless when nothing is interpolated."""

    code = "V001"
    severity = Severity.WARN
    description = "validateDependency without {{var}} tokens"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if (
            doc.has_block("script:pre-request")
            and VALIDATE_DEPENDENCY_RE.search(doc.text)
            and not VARIABLE_TOKEN_RE.search(doc.text)
        ):
            return [self._make_diagnostic(
                "validateDependency used but no variable tokens ({{var}}) present", ctx
            )]
        return []


class P001PickSingleMismatch(BaseRule):
    """Array assertions and pickSingle() should go together.

    Two mismatches are reported:

    * the body is asserted as an array and a post-response script exists,
      but the script never narrows the collection with ``pickSingle(...)``;
    * ``pickSingle(...)`` is called although the body was never asserted as
      an array.

    Files under the sample data directory with no ``assert`` block are
    exploration requests and are exempt.
    """

    code = "P001"
    severity = Severity.WARN
    description = "pickSingle/array assertion mismatch"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if not doc.has_block("assert") and self._in_sample_data(ctx):
            return []

        array_asserted = asserts_array_body(doc)
        picks_single = bool(PICK_SINGLE_RE.search(doc.text))

        if array_asserted and not picks_single and doc.has_block("script:post-response"):
            return [self._make_diagnostic(
                "P001 Collection response asserted as array but script lacks pickSingle(...) usage",
                ctx,
            )]
        if not array_asserted and picks_single:
            return [self._make_diagnostic(
                "P001 pickSingle used but response is not asserted as array", ctx
            )]
        return []

    @staticmethod
    def _in_sample_data(ctx: RuleContext) -> bool:
        return ctx.config.sample_data_dir in PurePosixPath(ctx.file).parts[:-1]
