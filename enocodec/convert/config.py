"""Converter configuration loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable

import yaml

from enocodec.codec.options import SerializeOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".eno-codec.yaml"


class ConfigError(ValueError):
    """Raised when a configuration file has an invalid shape."""


@dataclass
class ConverterConfig:
    """Settings for batch conversion of JSON files to block text."""

    output: str | None = None  # Output directory, None writes next to the input
    pattern: str | None = None  # Regex searched in file names
    ignore_empty: bool = True
    skip_fields: list[str] = field(default_factory=list)
    use_flags: bool = False
    force_multiline: list[str] = field(default_factory=list)

    @property
    def serialize_options(self) -> SerializeOptions:
        """Serializer options described by this config."""
        return SerializeOptions.build(
            ignore_empty=self.ignore_empty,
            skip_fields=self.skip_fields,
            use_flags=self.use_flags,
            force_multiline=self.force_multiline,
        )

    def merged(self, **overrides: Any) -> ConverterConfig:
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "output": self.output,
            "pattern": self.pattern,
            "ignore_empty": self.ignore_empty,
            "skip_fields": list(self.skip_fields),
            "use_flags": self.use_flags,
            "force_multiline": list(self.force_multiline),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConverterConfig:
        """Create config from dictionary."""
        return cls(
            output=data.get("output"),
            pattern=data.get("pattern"),
            ignore_empty=bool(data.get("ignore_empty", True)),
            skip_fields=split_fields(data.get("skip_fields")),
            use_flags=bool(data.get("use_flags", False)),
            force_multiline=split_fields(data.get("force_multiline")),
        )


def split_fields(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma-separated field list, or normalize a list of names.

    Blank entries are dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(name).strip() for name in value if str(name).strip()]


def load_config(config_path: Path | str | None = None) -> ConverterConfig:
    """Load converter config from a YAML file.

    Args:
        config_path: Path to the YAML file. Defaults to ``.eno-codec.yaml``
            in the working directory.

    Returns:
        ConverterConfig; defaults when the file is missing or unreadable.

    Raises:
        ConfigError: If the file holds something other than a mapping.
    """
    config_path = Path(config_path) if config_path else Path(CONFIG_FILENAME)
    if not config_path.exists():
        return ConverterConfig()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load config %s: %s", config_path, e)
        return ConverterConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")

    logger.debug("Loaded config from %s", config_path)
    return ConverterConfig.from_dict(data)


def save_config(config: ConverterConfig, config_path: Path | str) -> None:
    """Save converter config to a YAML file.

    Args:
        config: Config to save.
        config_path: Path to the YAML file.
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
