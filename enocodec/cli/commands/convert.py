"""Batch conversion commands."""

from __future__ import annotations

import re
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from enocodec.cli.commands.config import load_cli_config
from enocodec.convert.config import split_fields
from enocodec.convert.converter import (
    ConversionStats,
    ConversionStatus,
    EnoToJsonConverter,
    JsonToEnoConverter,
)

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--output", "-o", default=None, help="Output directory (default: same as input)")
@click.option("--pattern", "-p", default=None, help="Filter files by pattern (regex)")
@click.option("--dry-run", "-d", is_flag=True, help="Show what would be converted without writing files")
@click.option("--ignore-empty", "-i", is_flag=True, help="Skip empty fields in output (default)")
@click.option("--keep-empty", "-k", is_flag=True, help="Keep empty fields in output")
@click.option("--skip-fields", "-s", default=None, help="Comma-separated list of fields to skip")
@click.option("--use-flags", "-f", is_flag=True, help="Output boolean true values as flags")
@click.option("--force-multiline", "-m", default=None, help="Comma-separated list of fields to force multiline format")
@click.pass_context
def convert(
    ctx: click.Context,
    path: str,
    output: str | None,
    pattern: str | None,
    dry_run: bool,
    ignore_empty: bool,
    keep_empty: bool,
    skip_fields: str | None,
    use_flags: bool,
    force_multiline: str | None,
) -> None:
    """Convert JSON files to block text (.eno) files.

    PATH is a JSON file or a directory searched recursively.
    """
    if ignore_empty and keep_empty:
        raise click.UsageError("--ignore-empty and --keep-empty are mutually exclusive")

    config = load_cli_config(ctx).merged(
        output=output,
        pattern=pattern,
        ignore_empty=False if keep_empty else (True if ignore_empty else None),
        skip_fields=split_fields(skip_fields) if skip_fields is not None else None,
        use_flags=True if use_flags else None,
        force_multiline=split_fields(force_multiline) if force_multiline is not None else None,
    )

    try:
        converter = JsonToEnoConverter(config, dry_run=dry_run)
    except re.error as e:
        console.print(f"[red]Error:[/red] Invalid pattern {escape(repr(config.pattern))}: {e}")
        raise SystemExit(1)

    stats = converter.convert_path(Path(path))
    _print_summary(stats, dry_run)

    if stats.failed:
        raise SystemExit(1)


@click.command("to-json")
@click.argument("path", type=click.Path(exists=True))
@click.option("--output", "-o", default=None, help="Output directory (default: same as input)")
@click.option("--pattern", "-p", default=None, help="Filter files by pattern (regex)")
@click.option("--dry-run", "-d", is_flag=True, help="Show what would be converted without writing files")
@click.option("--indent", default=2, show_default=True, help="JSON indentation")
def to_json(path: str, output: str | None, pattern: str | None, dry_run: bool, indent: int) -> None:
    """Convert block text (.eno) files back to JSON files.

    PATH is an .eno file or a directory searched recursively.
    """
    try:
        converter = EnoToJsonConverter(output=output, pattern=pattern, dry_run=dry_run, indent=indent)
    except re.error as e:
        console.print(f"[red]Error:[/red] Invalid pattern {escape(repr(pattern))}: {e}")
        raise SystemExit(1)

    stats = converter.convert_path(Path(path))
    _print_summary(stats, dry_run)

    if stats.failed:
        raise SystemExit(1)


def _print_summary(stats: ConversionStats, dry_run: bool) -> None:
    """Print per-file outcomes of interest and the totals table."""
    for result in stats.results:
        if result.status == ConversionStatus.DRY_RUN:
            console.print(f"[cyan][DRY RUN][/cyan] Would convert {result.source} to {result.target}")
        elif result.status == ConversionStatus.FAILED:
            console.print(f"[red]Error converting {result.source}:[/red] {result.error}")

    table = Table(title="Conversion Summary" + (" (dry run)" if dry_run else ""))
    table.add_column("Metric", style="bold")
    table.add_column("Files", justify="right")

    table.add_row("Total files found", str(stats.total))
    table.add_row("[green]Successfully converted[/green]", str(stats.converted))
    table.add_row("[yellow]Skipped[/yellow]", str(stats.skipped))
    table.add_row("[red]Errors[/red]", str(stats.errors))

    console.print()
    console.print(table)
