"""CLI command: pagetree parse -- convert a page into pagetree JSON."""

from __future__ import annotations

import click

from pagetree.api import serialize, write_document
from pagetree.cli.common import configure_logging, load_document, read_styleguide, verbose_option


@click.command()
@click.argument("source")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON to this file instead of stdout.",
)
@click.option("--compact", is_flag=True, default=False, help="Emit JSON without indentation.")
@click.option(
    "--styleguide",
    "styleguide_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Design-system JSON file applied before parsing.",
)
@verbose_option
def parse(
    source: str,
    output: str | None,
    compact: bool,
    styleguide_path: str | None,
    verbose: bool,
) -> None:
    """Parse SOURCE (an HTML file or http(s) URL) into a pagetree document.

    Prints the document JSON, or writes it to --output.
    """
    configure_logging(verbose)
    document, context = load_document(source, read_styleguide(styleguide_path))

    for diag in context.diagnostics:
        click.echo(str(diag), err=True)

    if output:
        path = write_document(document, output, pretty=not compact)
        click.echo(f"Wrote {path}", err=True)
    else:
        click.echo(serialize(document, pretty=not compact))
