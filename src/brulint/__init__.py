"""brulint: static checker and fixer for Bruno request-definition files."""

from brulint._version import __version__
from brulint.scanner.classifier import classify
from brulint.scanner.engine import Linter
from brulint.scanner.suppression import is_suppressed

__all__ = [
    "__version__",
    "classify",
    "is_suppressed",
    "Linter",
]
