"""twformat CLI entry point: Click group with subcommands."""

import click

from twformat import __version__


@click.group()
@click.version_option(version=__version__, prog_name="twformat")
def cli() -> None:
    """twformat - group, order and wrap Tailwind classes in markup files."""


# Import and register subcommands
from twformat.cli.explain import explain  # noqa: E402
from twformat.cli.format import format_files  # noqa: E402

cli.add_command(format_files)
cli.add_command(explain)
