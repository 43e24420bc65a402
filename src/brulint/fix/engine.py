"""Fix Engine: applies rule fixes to in-memory text and verifies them."""

from __future__ import annotations

import logging

from brulint.fix.rule_fixer import RuleBasedFixer
from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks.base import BaseRule, RuleContext

logger = logging.getLogger("brulint.fix")


class FixEngine:
    """Applies the fix transform of a rule and keeps it only if it worked.

    A transform is accepted when it changes the text and the rule that asked
    for it no longer fires on the result. Anything else is discarded so the
    file is never left half-patched and the diagnostic stays outstanding.
    """

    def __init__(self, fixer: RuleBasedFixer | None = None):
        self.rule_fixer = fixer or RuleBasedFixer()

    def apply(self, rule: BaseRule, text: str, ctx: RuleContext) -> str | None:
        """Return the fixed text, or None when no safe fix could be applied."""
        if not rule.fixable or not self.rule_fixer.can_fix(rule.code):
            return None

        new_text = self.rule_fixer.try_fix(rule.code, text, ctx)
        if new_text is None or new_text == text:
            logger.warning("%s: cannot apply %s fix safely, leaving file unchanged", ctx.file, rule.code)
            return None

        if rule.run(BruDocument(new_text), ctx):
            logger.warning("%s: %s fix did not resolve the problem, discarded", ctx.file, rule.code)
            return None

        logger.debug("%s: applied %s fix", ctx.file, rule.code)
        return new_text
