"""Structural checks: required meta block, query params, settings (M001, Q001, S001)."""

from __future__ import annotations

import re

from brulint.core.models import Diagnostic, Severity
from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks.base import BaseRule, RuleContext

META_TYPE_HTTP_RE = re.compile(r"type:\s*http\b", re.IGNORECASE)
URL_LINE_RE = re.compile(r"url:\s*([^\n]+)", re.IGNORECASE)
ENCODE_URL_RE = re.compile(r"encodeUrl:\s*(true|false)\b", re.IGNORECASE)


def has_http_meta(doc: BruDocument) -> bool:
    return any(META_TYPE_HTTP_RE.search(b.body) for b in doc.find("meta"))


def settings_encode_url_declared(doc: BruDocument) -> bool:
    # Only the first settings block counts; later ones are never read.
    settings = doc.first("settings")
    return settings is not None and bool(ENCODE_URL_RE.search(settings.body))


class M001MissingMeta(BaseRule):
    """Request files need ``meta { type: http }``."""

    code = "M001"
    severity = Severity.ERROR
    fixable = True
    description = "Missing or invalid meta block"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if has_http_meta(doc):
            return []
        return [self._make_diagnostic("Missing or invalid meta block (must include type: http)", ctx)]


class Q001QueryWithoutParams(BaseRule):
    """A GET URL with a query string should be mirrored by ``params:query``."""

    code = "Q001"
    severity = Severity.WARN
    description = "Query string without params:query block"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        get_block = doc.first("get")
        if get_block is None:
            return []
        match = URL_LINE_RE.search(get_block.body)
        if not match or "?" not in match.group(1):
            return []
        if doc.has_block("params:query"):
            return []
        return [self._make_diagnostic("URL has query string but no params:query block", ctx)]


class S001MissingEncodeUrl(BaseRule):
    """``settings { encodeUrl: true|false }`` is recommended for every request."""

    code = "S001"
    severity = Severity.WARN
    fixable = True
    description = "Missing settings encodeUrl"

    def run(self, doc: BruDocument, ctx: RuleContext) -> list[Diagnostic]:
        if settings_encode_url_declared(doc):
            return []
        return [self._make_diagnostic("Missing settings encodeUrl (should be true or false)", ctx)]
