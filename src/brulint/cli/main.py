"""Click CLI entry point for brulint."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from brulint._version import __version__
from brulint.core.config import load_config
from brulint.core.errors import BruLintError
from brulint.core.output import print_report, report_to_json
from brulint.scanner.engine import Linter


@click.command()
@click.version_option(version=__version__, prog_name="brulint")
@click.argument(
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--fix", "fix_mode", is_flag=True, help="Insert missing meta and settings blocks in place")
@click.option("--json", "json_mode", is_flag=True, help="Print the report as JSON")
def cli(root: Path, fix_mode: bool, json_mode: bool):
    """Lint Bruno (.bru) request files under ROOT.

    Exits with status 1 while any error remains, warnings alone never fail.
    """
    try:
        config = load_config(root)
        linter = Linter(root, config, fix=fix_mode)
        report = linter.run()
    except (BruLintError, OSError, UnicodeDecodeError) as e:
        raise click.ClickException(str(e)) from e

    if json_mode:
        click.echo(report_to_json(report))
    else:
        print_report(report, fix_mode=fix_mode)

    if report.outstanding_errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()
