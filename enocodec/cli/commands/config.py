"""Configuration commands."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from rich.console import Console

from enocodec.convert.config import (
    CONFIG_FILENAME,
    ConfigError,
    ConverterConfig,
    load_config,
    save_config,
)

console = Console()


def load_cli_config(ctx: click.Context) -> ConverterConfig:
    """Load the config selected with the global ``--config`` option."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


@click.group("config")
def config_group() -> None:
    """Converter configuration commands."""
    pass


@config_group.command("init")
@click.option("--path", "config_path", default=CONFIG_FILENAME, help="Where to write the config")
@click.option("--force", is_flag=True, help="Overwrite an existing config")
def init_config(config_path: str, force: bool) -> None:
    """Write a config file with default settings."""
    path = Path(config_path)
    if path.exists() and not force:
        console.print(f"[red]Error:[/red] Config already exists: {path}")
        raise SystemExit(1)

    save_config(ConverterConfig(), path)
    console.print(f"[green]Created config:[/green] {path}")


@config_group.command("show")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration."""
    config = load_cli_config(ctx)
    text = yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
    console.print(text.rstrip(), markup=False, highlight=False, emoji=False)
