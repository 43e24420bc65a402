"""In-file suppression directives.

Accepted anywhere in a file, one directive per occurrence::

    @bru-lint-disable all
    @bru-lint-disable P001

Rule codes match as whole tokens: a directive for ``P0011`` does not
silence ``P001`` and a directive for ``P001`` does not silence ``P0011``.
"""

from __future__ import annotations

import re

DIRECTIVE = "@bru-lint-disable"

_ALL_RE = re.compile(re.escape(DIRECTIVE) + r"\s+all(?![\w-])")


def is_suppressed(text: str, code: str | None) -> bool:
    """True when ``text`` disables every rule or the rule named ``code``."""
    if _ALL_RE.search(text):
        return True
    if not code:
        return False
    pattern = re.escape(DIRECTIVE) + r"\s+" + re.escape(code) + r"(?![\w-])"
    return re.search(pattern, text) is not None
