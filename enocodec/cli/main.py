"""Main CLI entry point for eno-codec."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from enocodec import __version__
from enocodec.cli.commands.config import config_group
from enocodec.cli.commands.convert import convert, to_json
from enocodec.cli.commands.show import show


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to stderr through rich."""
    logger = logging.getLogger("enocodec")
    if not logger.handlers:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed progress")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Config file (default: .eno-codec.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """eno-codec - convert JSON documents to and from block text.

    \b
    EXAMPLES:
      eno convert data/                   Convert every JSON file below data/
      eno convert data/ -o out/ -p release  Only files named like "release"
      eno convert data/ -s id,slug -f     Skip fields, write flags
      eno to-json out/                    Parse .eno files back to JSON
      eno show release.json               Print the block text of one file
      eno config init                     Write a default .eno-codec.yaml
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(convert)
cli.add_command(to_json)
cli.add_command(show)
cli.add_command(config_group, name="config")


if __name__ == "__main__":
    cli()
