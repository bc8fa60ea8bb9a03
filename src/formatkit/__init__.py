"""
formatkit: encode values to, and decode them from, named data formats.

    import formatkit

    text = await formatkit.encode({"a": 1}, "yaml")
    value = await formatkit.decode("yaml", text)

Supported formats: cson, csv, hjson, ini, json, json5, xls, xlsx, xml, yaml.
Spreadsheet formats produce and consume `bytes`; use `get_encoding(format)` to
decide how to persist a codec's output.

Import Guidelines:
------------------
- Use the top-level functions for everyday conversion.
- Use `formatkit.codecs.CodecRegistry` to build an isolated registry (a subset
  of formats, or your own `BaseCodec` subclasses) and pass it as `registry=`.
- Use `formatkit.exceptions` for the error taxonomy.
"""

from importlib.metadata import PackageNotFoundError, version

from .api import (
    convert,
    convert_sync,
    decode,
    decode_sync,
    describe_formats,
    encode,
    encode_sync,
    get_default_registry,
    get_encoding,
    reset_default_registry,
    supported_formats,
)
from .codecs import BaseCodec, CodecRegistry
from .codecs.exceptions import CodecNotFoundError, ReviverNotSupportedError
from .exceptions import FormatError, FormatKitError, MissingFormatError, UnknownFormatError

try:
    __version__ = version("formatkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "encode",
    "decode",
    "convert",
    "encode_sync",
    "decode_sync",
    "convert_sync",
    "get_encoding",
    "supported_formats",
    "describe_formats",
    "get_default_registry",
    "reset_default_registry",
    "BaseCodec",
    "CodecRegistry",
    "FormatKitError",
    "FormatError",
    "UnknownFormatError",
    "MissingFormatError",
    "CodecNotFoundError",
    "ReviverNotSupportedError",
]
