"""eno-codec - convert JSON documents to and from indented block text."""

from enocodec.codec import SerializeOptions, parse, serialize

__version__ = "0.1.0"

__all__ = ["SerializeOptions", "__version__", "parse", "serialize"]
