"""
Module-level entry points.

`encode`, `decode` and `convert` are coroutines; the `*_sync` variants block.
All of them dispatch through the default registry (built lazily from the
package settings and frozen) unless a `registry=` is passed explicitly.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from .codecs.base import CodecInfo, Reviver
from .codecs.registry import CodecRegistry, remove_leading_dot

logger = logging.getLogger(__name__)

BINARY_FORMATS = frozenset({"xls", "xlsx"})

_default_registry: CodecRegistry | None = None
_default_lock = Lock()


def get_default_registry() -> CodecRegistry:
    """Return the process-wide registry, building and freezing it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                registry = CodecRegistry.with_builtins()
                registry.freeze()
                logger.info("formatkit.registry.ready formats=%s", registry.keys(as_csv=True))
                _default_registry = registry
    return _default_registry


def reset_default_registry() -> None:
    """Drop the cached default registry (the next call rebuilds it)."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def _registry(registry: CodecRegistry | None) -> CodecRegistry:
    return registry if registry is not None else get_default_registry()


def get_encoding(format: str) -> str:
    """
    Storage encoding for a format: "binary" for spreadsheets, "utf-8" otherwise.

    The name is dot-stripped and lowercased, so "XLSX" and ".xls" are binary
    too. This is looser than `encode`, which keeps the case of the name.
    """
    name = remove_leading_dot(format or "").lower()
    return "binary" if name in BINARY_FORMATS else "utf-8"


def supported_formats(*, registry: CodecRegistry | None = None) -> tuple[str, ...]:
    return _registry(registry).names()


def describe_formats(*, registry: CodecRegistry | None = None) -> list[CodecInfo]:
    return _registry(registry).describe()


# ---------------------------------------------------------------------------
# async
# ---------------------------------------------------------------------------

async def encode(value: Any, format: str, *, registry: CodecRegistry | None = None) -> str | bytes:
    """
    Serialize `value` into `format`.

    The format is dot-stripped but not lowercased.

    :raises UnknownFormatError: no codec is registered under `format`.
    """
    return await _registry(registry).aencode(value, format)


async def decode(
    format: str,
    text: str | bytes,
    reviver: Reviver | None = None,
    *,
    registry: CodecRegistry | None = None,
) -> Any:
    """
    Parse `text` written in `format`.

    The format is dot-stripped and lowercased. `reviver(key, value)` is applied
    bottom-up by codecs that support it.

    :raises UnknownFormatError: no codec is registered under `format`.
    """
    return await _registry(registry).adecode(format, text, reviver)


async def convert(text: str | bytes, format: str, *, registry: CodecRegistry | None = None) -> Any:
    """Deprecated: parse `text` as `format`; use :func:`decode`."""
    return await _registry(registry).aconvert(text, format)


# ---------------------------------------------------------------------------
# sync
# ---------------------------------------------------------------------------

def encode_sync(value: Any, format: str, *, registry: CodecRegistry | None = None) -> str | bytes:
    return _registry(registry).encode(value, format)


def decode_sync(
    format: str,
    text: str | bytes,
    reviver: Reviver | None = None,
    *,
    registry: CodecRegistry | None = None,
) -> Any:
    return _registry(registry).decode(format, text, reviver)


def convert_sync(text: str | bytes, format: str, *, registry: CodecRegistry | None = None) -> Any:
    return _registry(registry).convert(text, format)
