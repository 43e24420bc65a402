"""Tests for rule-based fix transforms."""

from __future__ import annotations

import pytest

from brulint.fix.rule_fixer import RuleBasedFixer
from brulint.scanner.checks.base import RuleContext
from brulint.scanner.classifier import classify


@pytest.fixture
def fixer() -> RuleBasedFixer:
    return RuleBasedFixer()


def _ctx(text: str, file: str = "SIS/Students/List Students.bru") -> RuleContext:
    return RuleContext(file=file, classification=classify(file, text))


GET = "get {\n  url: {{baseUrl}}/students\n}\n"


# ---------------------------------------------------------------------------
# M001: meta block
# ---------------------------------------------------------------------------
class TestFixM001:
    def test_prepends_meta_named_after_file(self, fixer: RuleBasedFixer):
        fixed = fixer.try_fix("M001", GET, _ctx(GET))
        assert fixed == "meta {\n  name: List Students\n  type: http\n}\n\n" + GET

    def test_adds_type_to_untyped_meta(self, fixer: RuleBasedFixer):
        text = "meta {\n  name: Custom\n  seq: 2\n}\n\n" + GET
        fixed = fixer.try_fix("M001", text, _ctx(text))
        assert fixed == "meta {\n  name: Custom\n  seq: 2\n  type: http\n}\n\n" + GET

    def test_conflicting_type_is_left_alone(self, fixer: RuleBasedFixer):
        text = "meta {\n  name: Custom\n  type: graphql\n}\n\n" + GET
        assert fixer.try_fix("M001", text, _ctx(text)) is None

    def test_unterminated_meta_is_left_alone(self, fixer: RuleBasedFixer):
        text = "meta {\n  name: Custom\n\n" + GET
        assert fixer.try_fix("M001", text, _ctx(text)) is None


# ---------------------------------------------------------------------------
# S001: settings encodeUrl
# ---------------------------------------------------------------------------
class TestFixS001:
    def test_appends_settings_block(self, fixer: RuleBasedFixer):
        text = GET + "\n\n\n"
        fixed = fixer.try_fix("S001", text, _ctx(text))
        assert fixed == GET.rstrip() + "\n\nsettings {\n  encodeUrl: true\n}\n"

    def test_patches_existing_settings_block(self, fixer: RuleBasedFixer):
        text = GET + "\nsettings {\n  timeout: 0\n}\n"
        fixed = fixer.try_fix("S001", text, _ctx(text))
        assert fixed == GET + "\nsettings {\n  timeout: 0\n  encodeUrl: true\n}\n"

    def test_patches_empty_settings_block(self, fixer: RuleBasedFixer):
        text = GET + "\nsettings {\n}\n"
        fixed = fixer.try_fix("S001", text, _ctx(text))
        assert fixed == GET + "\nsettings {\n  encodeUrl: true\n}\n"

    def test_existing_encode_url_entry_is_not_duplicated(self, fixer: RuleBasedFixer):
        text = GET + "\nsettings {\n  encodeUrl: yes\n}\n"
        assert fixer.try_fix("S001", text, _ctx(text)) is None

    def test_only_first_settings_block_is_patched(self, fixer: RuleBasedFixer):
        text = GET + "\nsettings {\n  timeout: 0\n}\n\nsettings {\n  encodeUrl: false\n}\n"
        fixed = fixer.try_fix("S001", text, _ctx(text))
        assert fixed is not None
        assert fixed.count("encodeUrl: true") == 1
        assert fixed.index("encodeUrl: true") < fixed.index("encodeUrl: false")


class TestFixerDispatch:
    def test_unknown_code(self, fixer: RuleBasedFixer):
        assert fixer.try_fix("P001", GET, _ctx(GET)) is None
        assert not fixer.can_fix("P001")

    def test_known_codes(self, fixer: RuleBasedFixer):
        assert fixer.can_fix("M001")
        assert fixer.can_fix("S001")


class TestCrlfInput:
    CRLF_GET = GET.replace("\n", "\r\n")

    def test_prepended_meta_uses_crlf(self, fixer: RuleBasedFixer):
        fixed = fixer.try_fix("M001", self.CRLF_GET, _ctx(self.CRLF_GET))
        assert fixed == "meta {\r\n  name: List Students\r\n  type: http\r\n}\r\n\r\n" + self.CRLF_GET

    def test_appended_settings_uses_crlf(self, fixer: RuleBasedFixer):
        fixed = fixer.try_fix("S001", self.CRLF_GET, _ctx(self.CRLF_GET))
        assert fixed == self.CRLF_GET.rstrip() + "\r\n\r\nsettings {\r\n  encodeUrl: true\r\n}\r\n"

    def test_patched_settings_uses_crlf(self, fixer: RuleBasedFixer):
        text = self.CRLF_GET + "\r\nsettings {\r\n  timeout: 0\r\n}\r\n"
        fixed = fixer.try_fix("S001", text, _ctx(text))
        assert fixed == self.CRLF_GET + "\r\nsettings {\r\n  timeout: 0\r\n  encodeUrl: true\r\n}\r\n"
        assert "\n" not in fixed.replace("\r\n", "")
