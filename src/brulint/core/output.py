"""Rich terminal formatting and JSON payloads for brulint output."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from brulint.core.models import Diagnostic, LintReport, Severity

console = Console(soft_wrap=True)


SEVERITY_ICONS = {
    Severity.ERROR: "[red]✗[/red]",
    Severity.WARN: "[yellow]⚠[/yellow]",
}

SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARN: "yellow",
}


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Format a single diagnostic for terminal output."""
    icon = SEVERITY_ICONS.get(diagnostic.severity, "●")
    color = SEVERITY_COLORS.get(diagnostic.severity, "white")
    level = diagnostic.severity.value
    return f"{icon} [{color}]\\[{level}][/{color}] {escape(diagnostic.file)} :: {escape(diagnostic.message)}"


def print_report(report: LintReport, fix_mode: bool = False) -> None:
    """Print diagnostics and the closing verdict line."""
    outstanding = len(report.outstanding_errors)
    fixed = len(report.fixed_files)

    if not report.diagnostics:
        if fix_mode and fixed:
            console.print(f"[green]✓ All Bruno files passed after fixing {fixed} file(s).[/green]")
        else:
            console.print("[green]✓ All Bruno files passed lint checks.[/green]")
        return

    for diagnostic in report.diagnostics:
        console.print(format_diagnostic(diagnostic))

    if fix_mode and fixed:
        console.print(f"\nApplied fixes to {fixed} file(s).")

    summary = report.summary
    console.print(
        f"\n[dim]{summary.files_scanned} files | {summary.errors} errors | "
        f"{summary.warnings} warnings[/dim]"
    )

    if outstanding and fix_mode:
        console.print(f"[red]{outstanding} error(s) remain after auto-fix (re-run lint).[/red]")
    elif outstanding:
        console.print(f"[red]{outstanding} error(s) detected.[/red]")
    else:
        console.print("Lint completed with warnings.")


def report_to_json(report: LintReport) -> str:
    return json.dumps(report.to_dict(), indent=2)
