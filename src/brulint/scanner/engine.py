"""Lint engine: classifies files, runs every rule and applies fixes."""

from __future__ import annotations

import logging
from pathlib import Path

from brulint.core.config import BruLintConfig, load_config
from brulint.core.models import FileResult, FixRecord, LintReport
from brulint.fix.applier import FixApplier
from brulint.fix.engine import FixEngine
from brulint.scanner.blocks import BruDocument
from brulint.scanner.checks import ALL_RULES
from brulint.scanner.checks.base import BaseRule, RuleContext
from brulint.scanner.classifier import classify
from brulint.scanner.suppression import is_suppressed

logger = logging.getLogger("brulint.scanner")

BRU_SUFFIX = ".bru"


class Linter:
    """Main linter that runs all rules over a project's .bru files."""

    def __init__(
        self,
        project_path: Path | None = None,
        config: BruLintConfig | None = None,
        fix: bool = False,
        rules: list[type[BaseRule]] | None = None,
    ):
        self.project_path = (project_path or Path.cwd()).resolve()
        self.config = config or load_config(self.project_path)
        self.fix_mode = fix
        self.rules: list[BaseRule] = [cls() for cls in (ALL_RULES if rules is None else rules)]
        self.fix_engine = FixEngine()
        self.applier = FixApplier(self.project_path)

    def run(self, target_path: Path | None = None) -> LintReport:
        """Lint every candidate file and, in fix mode, write repaired files back."""
        report = LintReport()
        for bru_file in self.collect_files(target_path or self.project_path):
            result = self.lint_file(bru_file)
            written = self.fix_mode and self.applier.apply(result)
            if written:
                logger.info("Fixed %s", result.file)
            report.add(result, written=written)
        return report

    def lint_file(self, file_path: Path) -> FileResult:
        """Read and evaluate a single file. Does not write anything."""
        # newline="" keeps line endings intact for the write-back.
        with open(file_path, encoding="utf-8", newline="") as f:
            text = f.read()
        return self.lint_text(self._relative(file_path), text)

    def lint_text(self, file: str, text: str, fix: bool | None = None) -> FileResult:
        """Evaluate ``text`` as the contents of ``file`` (relative to the project root).

        Classification happens once up front. Rules then run in order against
        the current text, which fixes may update as the pass goes on.
        """
        fix = self.fix_mode if fix is None else fix
        classification = classify(file, text)
        result = FileResult(
            file=file,
            classification=classification,
            original_text=text,
            text=text,
        )
        if not classification.is_request_file:
            logger.debug("Skipping %s (not a request file)", file)
            return result

        ctx = RuleContext(file=file, classification=classification, config=self.config.lint)
        for rule in self.rules:
            if rule.code in self.config.lint.ignore or is_suppressed(result.text, rule.code):
                logger.debug("%s: %s suppressed", file, rule.code)
                continue

            diagnostics = rule.run(BruDocument(result.text), ctx)
            result.diagnostics.extend(diagnostics)

            if fix and diagnostics and rule.fixable:
                fixed_text = self.fix_engine.apply(rule, result.text, ctx)
                if fixed_text is not None:
                    result.text = fixed_text
                    result.fixes.append(FixRecord(file=file, code=rule.code))

        return result

    def collect_files(self, path: Path) -> list[Path]:
        if path.is_file():
            return [path] if path.suffix == BRU_SUFFIX else []
        return collect_bru_files(path, self.config)

    def _relative(self, file_path: Path) -> str:
        try:
            return file_path.resolve().relative_to(self.project_path).as_posix()
        except ValueError:
            return file_path.as_posix()


def collect_bru_files(root: Path, config: BruLintConfig) -> list[Path]:
    """Collect .bru files under the configured top-level directories of ``root``.

    Hidden entries and excluded directory names are skipped at any depth.
    An empty ``include_dirs`` accepts the whole tree.
    """
    bru_files: list[Path] = []
    for bru_file in root.rglob(f"*{BRU_SUFFIX}"):
        if not bru_file.is_file():
            continue
        parts = bru_file.relative_to(root).parts
        if any(p.startswith(".") for p in parts) or any(p in config.exclude for p in parts[:-1]):
            continue
        if config.include_dirs and parts[0] not in config.include_dirs:
            continue
        bru_files.append(bru_file)
    return sorted(bru_files)
