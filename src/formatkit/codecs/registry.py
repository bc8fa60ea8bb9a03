"""
Codec registry: format name -> codec instance, plus encode/decode dispatch.

Lookup model
------------
- Codecs are stored under their `name` exactly as declared (lowercase).
- `encode` strips one leading "." from the requested format but does NOT
  lowercase it: `encode(v, "JSON")` is an unknown format.
- `decode` and `convert` strip the dot and lowercase: `decode("JSON", ...)`
  and `decode(".json", ...)` both resolve to the json codec.

Failure policy
--------------
- Unknown name -> `CodecNotFoundError` (an `UnknownFormatError`) carrying the
  requested name.
- Library errors raised by a codec propagate unchanged.

Public API
----------
    CodecRegistry(codecs=(), *, strict_reviver=False)
    CodecRegistry.with_builtins(formats=None, *, settings=None) -> CodecRegistry
    CodecRegistry.encode(value, format) / aencode(...)
    CodecRegistry.decode(format, text, reviver=None) / adecode(...)
    CodecRegistry.convert(text, format) / aconvert(...)
    CodecRegistry.names() / describe()
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Iterable

from asgiref.sync import sync_to_async

from formatkit.exceptions import MissingFormatError
from formatkit.registry.base import BaseRegistry
from formatkit.tracing import service_span, service_span_sync
from .base import BaseCodec, CodecInfo, Reviver
from .decorators import builtin_codec_classes
from .exceptions import CodecNotFoundError, ReviverNotSupportedError

logger = logging.getLogger(__name__)

__all__ = ["CodecRegistry", "remove_leading_dot", "normalize_format"]


# ---------------------------- helpers ----------------------------

def remove_leading_dot(format_or_extension: str) -> str:
    """Strip a single leading "." (as in a file extension)."""
    if format_or_extension and format_or_extension[0] == ".":
        return format_or_extension[1:]
    return format_or_extension


def normalize_format(format_or_extension: str) -> str:
    """Dot-strip and lowercase; the normalization used on the decode path."""
    return remove_leading_dot(format_or_extension).lower()


def _codec_name(codec: BaseCodec) -> str:
    return codec.name


# ---------------------------- registry ----------------------------

class CodecRegistry(BaseRegistry[str, BaseCodec]):
    """Registry of codec instances keyed by format name."""

    def __init__(self, codecs: Iterable[BaseCodec] = (), *, strict_reviver: bool = False) -> None:
        super().__init__(coerce_key=str, key_of=_codec_name)
        self.strict_reviver = strict_reviver
        for codec in codecs:
            self.register(codec)

    @classmethod
    def with_builtins(cls, formats: Iterable[str] | None = None, *, settings: Any = None) -> "CodecRegistry":
        """Build a registry holding the built-in codecs.

        `formats` narrows the set (defaults to `settings.FORMATS`); codec knobs
        and the reviver policy come from `settings` (defaults to the cached
        package settings).
        """
        # Importing the package runs the builtins auto-import.
        import formatkit.codecs.builtins  # noqa: F401
        from formatkit.conf import get_settings

        settings = settings if settings is not None else get_settings()
        catalogue = builtin_codec_classes()
        wanted = tuple(formats) if formats is not None else settings.FORMATS

        registry = cls(strict_reviver=settings.STRICT_REVIVER)
        for name in wanted:
            try:
                codec_cls = catalogue[name]
            except KeyError:
                raise CodecNotFoundError(name) from None
            registry.register(codec_cls.from_settings(settings))
        return registry

    # --- registration ---

    def register(self, obj: BaseCodec, *, strict: bool = False) -> BaseCodec:
        if not isinstance(obj, BaseCodec):
            raise TypeError(f"Expected a BaseCodec instance, got {type(obj).__name__}")
        codec = super().register(obj, strict=strict)
        logger.debug("codec.registered %s (%s)", codec.name, type(codec).__name__)
        return codec

    def _miss(self, key: Any) -> Exception:
        return CodecNotFoundError(key)

    def _resolve(self, name: str, requested: str) -> BaseCodec:
        codec = self.try_get(name)
        if codec is None:
            logger.debug("codec.lookup.miss %s", requested)
            raise CodecNotFoundError(requested)
        return codec

    # --- introspection ---

    def names(self) -> tuple[str, ...]:
        return self.keys()

    def describe(self) -> list[CodecInfo]:
        return [codec.describe() for codec in self.all()]

    # --- dispatch ---

    def encode(self, value: Any, format: str) -> str | bytes:
        """Encode `value` with the codec named `format` (dot-stripped, case kept)."""
        codec = self._resolve(remove_leading_dot(format), format)
        with service_span_sync(
            "formatkit.codec.encode",
            attributes={"formatkit.format": codec.name, "formatkit.binary": codec.binary},
        ):
            return codec.encode(value)

    def decode(self, format: str, text: str | bytes, reviver: Reviver | None = None) -> Any:
        """Decode `text` with the codec named `format` (dot-stripped, lowercased)."""
        codec = self._resolve(normalize_format(format), format)
        if reviver is not None and not codec.supports_reviver:
            if self.strict_reviver:
                raise ReviverNotSupportedError(codec.name)
            logger.debug("codec.reviver.ignored %s", codec.name)
            reviver = None
        with service_span_sync(
            "formatkit.codec.decode",
            attributes={
                "formatkit.format": codec.name,
                "formatkit.binary": codec.binary,
                "formatkit.reviver": reviver is not None,
            },
        ):
            return codec.decode(text, reviver)

    def convert(self, text: str | bytes, format: str) -> Any:
        """Deprecated alias of :meth:`decode` that rejects an empty format."""
        warnings.warn(
            "convert() is deprecated; use decode(format, text) instead",
            DeprecationWarning,
            stacklevel=2,
        )
        name = remove_leading_dot(format)
        if not name:
            raise MissingFormatError()
        return self.decode(name.lower(), text)

    # --- async dispatch ---

    async def aencode(self, value: Any, format: str) -> str | bytes:
        async with service_span("formatkit.codec.aencode", attributes={"formatkit.format": format}):
            return await sync_to_async(self.encode, thread_sensitive=False)(value, format)

    async def adecode(self, format: str, text: str | bytes, reviver: Reviver | None = None) -> Any:
        async with service_span("formatkit.codec.adecode", attributes={"formatkit.format": format}):
            return await sync_to_async(self.decode, thread_sensitive=False)(format, text, reviver)

    async def aconvert(self, text: str | bytes, format: str) -> Any:
        warnings.warn(
            "aconvert() is deprecated; use adecode(format, text) instead",
            DeprecationWarning,
            stacklevel=2,
        )
        name = remove_leading_dot(format)
        if not name:
            raise MissingFormatError()
        return await self.adecode(name.lower(), text)
