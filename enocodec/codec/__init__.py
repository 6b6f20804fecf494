"""Block text codec: value model, serializer and parser."""

from enocodec.codec.options import DEFAULT_OPTIONS, SerializeOptions
from enocodec.codec.parser import EnoParser, Frame, OpenBlock, parse, parse_file
from enocodec.codec.serializer import Serializer, serialize
from enocodec.codec.values import (
    Value,
    ValueKind,
    coerce_scalar,
    format_number,
    format_scalar,
    is_container,
    is_empty,
    json_safe,
    kind_of,
    parse_number,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "EnoParser",
    "Frame",
    "OpenBlock",
    "SerializeOptions",
    "Serializer",
    "Value",
    "ValueKind",
    "coerce_scalar",
    "format_number",
    "format_scalar",
    "is_container",
    "is_empty",
    "json_safe",
    "kind_of",
    "parse",
    "parse_file",
    "parse_number",
    "serialize",
]
