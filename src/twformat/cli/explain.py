"""CLI command: twformat explain -- show how classes are grouped."""

from __future__ import annotations

import click

from twformat.layout import category_buckets, group_responsive
from twformat.parser import breakpoint_of, class_property, split_classes


@click.command()
@click.argument("classes", nargs=-1, required=True)
def explain(classes: tuple[str, ...]) -> None:
    """Show category, property and breakpoint for each class.

    Classes are listed in the order ``format`` would write them.
    """
    tokens = [token for value in classes for token in split_classes(value)]
    for category, bucket in category_buckets(tokens):
        click.echo(f"{category}:")
        for cluster in group_responsive(bucket):
            for token in cluster:
                parts = [f"  {token}", f"property={class_property(token)}"]
                breakpoint = breakpoint_of(token)
                if breakpoint:
                    parts.append(f"breakpoint={breakpoint}")
                click.echo("  ".join(parts))
