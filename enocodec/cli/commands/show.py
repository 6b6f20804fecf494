"""Show command for printing a single converted file."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console

from enocodec.cli.commands.config import load_cli_config
from enocodec.codec.parser import parse
from enocodec.codec.serializer import serialize
from enocodec.codec.values import json_safe

console = Console()


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", "json_output", is_flag=True, help="Parse block text and print JSON")
@click.option("--indent", default=2, show_default=True, help="JSON indentation")
@click.pass_context
def show(ctx: click.Context, file: str, json_output: bool, indent: int) -> None:
    """Print FILE converted to the other notation.

    JSON files are printed as block text using the configured options;
    with --json-output (or for .eno files) block text is parsed and printed
    as JSON.
    """
    path = Path(file)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read {path}: {e}")
        raise SystemExit(1)

    if json_output or path.suffix == ".eno":
        output = json.dumps(json_safe(parse(text)), indent=indent, ensure_ascii=False, allow_nan=False)
    else:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            console.print(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
            raise SystemExit(1)
        output = serialize(value, options=load_cli_config(ctx).serialize_options)

    console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)
