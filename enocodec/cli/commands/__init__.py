"""CLI commands for eno-codec."""

from enocodec.cli.commands.config import config_group
from enocodec.cli.commands.convert import convert, to_json
from enocodec.cli.commands.show import show

__all__ = [
    "config_group",
    "convert",
    "show",
    "to_json",
]
