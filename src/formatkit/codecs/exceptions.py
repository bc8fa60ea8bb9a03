# formatkit/codecs/exceptions.py
from formatkit.exceptions.base import FormatKitError, UnknownFormatError
from formatkit.registry.exceptions import RegistryLookupError

__all__ = [
    "CodecError", "CodecNotFoundError", "ReviverNotSupportedError",
]


class CodecError(FormatKitError):
    """Base error for all codec-related failures."""


class CodecNotFoundError(UnknownFormatError, CodecError, RegistryLookupError):
    """Requested codec not found in registry."""


class ReviverNotSupportedError(CodecError, TypeError):
    """A reviver was passed to a codec whose library has no revival hook."""

    def __init__(self, format: str):
        super().__init__(f"Codec '{format}' does not support a reviver")
        self.format = format
