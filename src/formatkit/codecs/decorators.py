# formatkit/codecs/decorators.py
"""
Class decorator collecting the built-in codec classes.

Decorated classes are only *catalogued* here; instances are created when a
`CodecRegistry` is built (see `CodecRegistry.with_builtins`), so importing a
codec module never mutates a live registry.
"""
from __future__ import annotations

import logging
from typing import TypeVar

from .base import BaseCodec

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type[BaseCodec])

_BUILTINS: dict[str, type[BaseCodec]] = {}


def builtin_codec(cls: C) -> C:
    """Add a codec class to the built-in catalogue under its `name`."""
    name = getattr(cls, "name", None)
    if not isinstance(name, str) or not name or name != name.lower():
        raise TypeError(f"Codec {cls.__name__} must define a lowercase 'name'")
    existing = _BUILTINS.get(name)
    if existing is not None and existing is not cls:
        raise TypeError(f"Built-in codec name '{name}' already used by {existing.__name__}")
    _BUILTINS[name] = cls
    logger.debug("codec.catalogued %s (%s)", name, cls.__name__)
    return cls


def builtin_codec_classes() -> dict[str, type[BaseCodec]]:
    """Return a copy of the built-in catalogue (name -> codec class)."""
    return dict(_BUILTINS)


__all__ = ["builtin_codec", "builtin_codec_classes"]
