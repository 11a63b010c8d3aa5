"""CLI command: twformat format -- rewrite class attributes in files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from twformat.config import ConfigError, load_config, merge_overrides
from twformat.document import format_text

logger = logging.getLogger(__name__)


@click.command("format")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: .twformat.yaml in the current directory)",
)
@click.option("--max-line-width", type=int, default=None, help="Line budget; 0 disables wrapping")
@click.option(
    "--wrap-indent",
    type=click.Choice(["same", "extra"]),
    default=None,
    help="Indentation of wrapped lines",
)
@click.option(
    "--close-quote-newline/--no-close-quote-newline",
    default=None,
    help="Put the closing quote on its own line",
)
@click.option("--check", is_flag=True, help="Write nothing; exit 1 if a file would change")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print results instead of writing")
@click.option("-v", "--verbose", is_flag=True, help="Log every rewritten tag")
def format_files(
    paths: tuple[Path, ...],
    config_path: Path | None,
    max_line_width: int | None,
    wrap_indent: str | None,
    close_quote_newline: bool | None,
    check: bool,
    to_stdout: bool,
    verbose: bool,
) -> None:
    """Format the class attributes of each PATH.

    Files are rewritten in place unless --check or --stdout is given.
    """
    if check and to_stdout:
        raise click.UsageError("--check and --stdout cannot be used together")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = merge_overrides(
            load_config(config_path),
            close_quote_on_new_line=close_quote_newline,
            max_line_width=max_line_width,
            wrap_indent_style=wrap_indent,
        )
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    logger.debug("Using %s", config)

    changed: list[Path] = []
    for path in paths:
        try:
            with path.open(encoding="utf-8", newline="") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"Cannot read {path}: {exc}", err=True)
            sys.exit(1)

        logger.info("Formatting %s", path)
        result = format_text(source, config)
        if to_stdout:
            click.echo(result, nl=False)
        if result == source:
            continue
        changed.append(path)
        if check:
            click.echo(f"Would reformat: {path}")
        elif not to_stdout:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(result)
            click.echo(f"Formatted: {path}")

    if check:
        click.echo(f"{len(changed)} of {len(paths)} file(s) would change")
    elif not to_stdout:
        click.echo(f"{len(changed)} of {len(paths)} file(s) changed")
    if check and changed:
        sys.exit(1)
