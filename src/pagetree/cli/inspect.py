"""CLI command: pagetree inspect -- display the produced tree as an outline."""

from __future__ import annotations

import click

from pagetree.cli.common import configure_logging, load_document, verbose_option
from pagetree.model.node import Node


def _outline(node: Node, depth: int = 0) -> list[str]:
    parts = [f"{'  ' * depth}{node.kind}"]
    if node.id:
        parts.append(f"id={node.id}")
    if node.order_key:
        parts.append(f"key={node.order_key}")
    if node.anchor:
        parts.append(f"anchor=#{node.anchor}")
    lines = ["  ".join(parts)]
    for child in node.children or ():
        # Inline rich text carries no id; the outline stops at its editable node.
        if child.id is None:
            continue
        lines.extend(_outline(child, depth + 1))
    return lines


@click.command()
@click.argument("source")
@verbose_option
def inspect(source: str, verbose: bool) -> None:
    """Parse SOURCE and display the content and popup trees.

    Shows each node's kind, id, order key and anchor.
    """
    configure_logging(verbose)
    document, context = load_document(source)

    nodes = list(document.nodes())
    click.echo(f"Version: {document.format_version}")
    click.echo(f"Nodes:   {len(nodes)}")
    click.echo(f"Anchors: {len(context.references)}")
    click.echo()

    click.echo("Content:")
    for line in _outline(document.content, 1):
        click.echo(line)
    click.echo()

    click.echo("Popup:")
    for line in _outline(document.overlay, 1):
        click.echo(line)
