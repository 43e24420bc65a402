"""Lint rules, in the order they are evaluated for every request file."""

from brulint.scanner.checks.base import BaseRule, RuleContext
from brulint.scanner.checks.certification import (
    C001MutatingVerbInCheck,
    D001HardcodedDescriptor,
)
from brulint.scanner.checks.consistency import (
    A001MixedBodyAsserts,
    P001PickSingleMismatch,
    V001DependencyWithoutVariables,
)
from brulint.scanner.checks.structure import (
    M001MissingMeta,
    Q001QueryWithoutParams,
    S001MissingEncodeUrl,
)

# Order only affects diagnostic order. S001 runs after M001 so its fix sees
# the freshly inserted meta block.
ALL_RULES: list[type[BaseRule]] = [
    M001MissingMeta,
    Q001QueryWithoutParams,
    D001HardcodedDescriptor,
    A001MixedBodyAsserts,
    V001DependencyWithoutVariables,
    C001MutatingVerbInCheck,
    P001PickSingleMismatch,
    S001MissingEncodeUrl,
]

__all__ = ["BaseRule", "RuleContext", "ALL_RULES"]
