"""
Codec package.

Codecs are the translation layer between a structured value (nested dicts,
lists and scalars) and one textual or binary format. Each codec delegates to
exactly one parsing/serialization library.

This package provides:
    - `BaseCodec`: the base class every codec implements
    - `CodecRegistry`: name -> codec lookup plus encode/decode dispatch
    - `builtin_codec`: class decorator cataloguing the built-in codecs

Usage Example:
    from formatkit.codecs import BaseCodec, CodecRegistry

    class UpperCodec(BaseCodec):
        name = "upper"

        def encode(self, value):
            return str(value).upper()

        def decode(self, text, reviver=None):
            return text.lower()

    registry = CodecRegistry([UpperCodec()])
    registry.encode("hi", "upper")  # -> "HI"
"""

from .base import BaseCodec, CodecInfo, Reviver
from .decorators import builtin_codec, builtin_codec_classes
from .exceptions import (
    CodecError,
    CodecNotFoundError,
    ReviverNotSupportedError,
)
from .registry import CodecRegistry, normalize_format, remove_leading_dot

__all__ = [
    "BaseCodec",
    "CodecInfo",
    "CodecRegistry",
    "Reviver",
    "builtin_codec",
    "builtin_codec_classes",
    "normalize_format",
    "remove_leading_dot",
    # errors
    "CodecError",
    "CodecNotFoundError",
    "ReviverNotSupportedError",
]
