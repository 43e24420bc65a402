"""Rule-based fix transforms for deterministic patterns.

Every transform is a pure ``text -> text`` function. A transform returns
``None`` when it cannot patch the file safely; the caller then leaves the
text untouched.
"""

from __future__ import annotations

import re

from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks.base import RuleContext

META_TYPE_ENTRY_RE = re.compile(r"^\s*type\s*:", re.MULTILINE | re.IGNORECASE)
ENCODE_URL_ENTRY_RE = re.compile(r"encodeUrl\s*:", re.IGNORECASE)


class RuleBasedFixer:
    """Generates deterministic fixes for rules that define one."""

    def try_fix(self, code: str, text: str, ctx: RuleContext) -> str | None:
        """Try to fix ``text`` for rule ``code``. Returns None if not applicable."""
        handler = self._get_handler(code)
        if handler:
            return handler(text, ctx)
        return None

    def can_fix(self, code: str) -> bool:
        return self._get_handler(code) is not None

    def _get_handler(self, code: str):
        """Get the fix handler for a rule code."""
        handlers = {
            "M001": self._fix_missing_meta,
            "S001": self._fix_missing_encode_url,
        }
        return handlers.get(code)

    def _fix_missing_meta(self, text: str, ctx: RuleContext) -> str | None:
        """M001: prepend a meta block, or add ``type: http`` to an untyped one."""
        meta = BruDocument(text).first("meta")
        if meta is None:
            nl = _line_ending(text)
            return f"meta {{{nl}  name: {ctx.stem}{nl}  type: http{nl}}}{nl}{nl}" + text

        if not meta.closed or META_TYPE_ENTRY_RE.search(meta.body):
            # Conflicting type (e.g. graphql) or broken block: leave it alone.
            return None
        return _insert_entry(text, meta.body_start, meta.body_end, "type: http")

    def _fix_missing_encode_url(self, text: str, ctx: RuleContext) -> str | None:
        """S001: patch the first settings block, or append a new one."""
        settings = BruDocument(text).first("settings")
        if settings is None:
            nl = _line_ending(text)
            return text.rstrip() + f"{nl}{nl}settings {{{nl}  encodeUrl: true{nl}}}{nl}"

        if not settings.closed or ENCODE_URL_ENTRY_RE.search(settings.body):
            return None
        return _insert_entry(text, settings.body_start, settings.body_end, "encodeUrl: true")


def _insert_entry(text: str, body_start: int, body_end: int, entry: str) -> str:
    """Add ``entry`` as the last line of the block body spanning the given offsets."""
    nl = _line_ending(text)
    body = text[body_start:body_end].rstrip()
    return text[:body_start] + f"{body}{nl}  {entry}{nl}" + text[body_end:]


def _line_ending(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"
