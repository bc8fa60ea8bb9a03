# formatkit/exceptions/__init__.py
"""
Exception classes shared across formatkit.

Failures raised by the underlying parsing/serialization libraries
(`json.JSONDecodeError`, `yaml.YAMLError`, `configparser.Error`, ...) are not
part of this hierarchy: they propagate to the caller unchanged.
"""
from .base import FormatError, FormatKitError, MissingFormatError, UnknownFormatError

__all__ = [
    "FormatKitError",
    "FormatError",
    "UnknownFormatError",
    "MissingFormatError",
]
