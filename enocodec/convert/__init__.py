"""Configuration and batch file conversion."""

from enocodec.convert.config import (
    CONFIG_FILENAME,
    ConfigError,
    ConverterConfig,
    load_config,
    save_config,
    split_fields,
)
from enocodec.convert.converter import (
    ConversionStats,
    ConversionStatus,
    EnoToJsonConverter,
    FileConverter,
    FileResult,
    JsonToEnoConverter,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConversionStats",
    "ConversionStatus",
    "ConverterConfig",
    "EnoToJsonConverter",
    "FileConverter",
    "FileResult",
    "JsonToEnoConverter",
    "load_config",
    "save_config",
    "split_fields",
]
