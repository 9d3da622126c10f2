"""Helpers shared by the CLI commands: logging setup and loading a page."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, TypeVar

import click

from pagetree.api import parse as parse_page
from pagetree.model.context import ParseContext
from pagetree.model.document import Document
from pagetree.source.errors import SourceError
from pagetree.source.loader import read_source

F = TypeVar("F", bound=Callable[..., Any])


def verbose_option(func: F) -> F:
    """Add ``-v/--verbose`` to a command."""
    return click.option(
        "-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr."
    )(func)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_styleguide(path: str | None) -> dict[str, Any] | None:
    """Load a design-system JSON file given with ``--styleguide``."""
    if path is None:
        return None
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}", param_hint="--styleguide")
    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must hold a JSON object", param_hint="--styleguide")
    return data


def load_document(
    source: str, styleguide: dict[str, Any] | None = None
) -> tuple[Document, ParseContext]:
    """Read and parse *source*; exits with code 1 when that is impossible."""
    try:
        markup = read_source(source)
    except SourceError as exc:
        click.echo(f"Source error: {exc}", err=True)
        sys.exit(1)

    context = ParseContext()
    document = parse_page(markup, context=context, styleguide=styleguide)
    if document is None:
        for diag in context.errors:
            click.echo(str(diag), err=True)
        click.echo(f"Parse error: nothing to convert in {source}", err=True)
        sys.exit(1)
    return document, context
