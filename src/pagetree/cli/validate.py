"""CLI command: pagetree validate -- parse a page and check the document."""

from __future__ import annotations

import sys

import click

from pagetree.cli.common import configure_logging, load_document, verbose_option
from pagetree.model.diagnostic import Severity
from pagetree.validation import validate as run_validate


@click.command()
@click.argument("source")
@verbose_option
def validate(source: str, verbose: bool) -> None:
    """Parse SOURCE and validate the resulting document.

    Prints diagnostics from parsing and validation, and exits with code 0
    if no errors are found, or code 1 if there are errors.
    """
    configure_logging(verbose)
    document, context = load_document(source)

    diagnostics = list(context.diagnostics)
    diagnostics.extend(run_validate(document, context.config))

    if not diagnostics:
        click.echo(f"OK: {source} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
