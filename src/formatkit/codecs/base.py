"""Base codec class: one named format, one encode and one decode capability.

Responsibilities:
  - Declare the format identifier (`name`) and its capability flags
    (`binary`, `supports_reviver`).
  - Delegate `encode`/`decode` to exactly one underlying library call, with
    the format's fixed settings baked in.

NOT responsible for:
  - Format-name normalization or dispatch (that's the registry's job).
  - Wrapping library failures: parse/serialize errors propagate unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

Reviver = Callable[[Any, Any], Any]


class CodecInfo(BaseModel):
    """Read-only description of a registered codec."""

    model_config = ConfigDict(frozen=True)

    name: str
    binary: bool
    supports_reviver: bool
    extensions: tuple[str, ...] = ()
    encoding: str
    description: str


class BaseCodec(ABC):
    """Base class for format codecs.

    Subclasses set the class attributes below and implement `encode` and
    `decode`. Instances are immutable once constructed; configuration is passed
    to `__init__` and stored before the instance is sealed.
    """

    #: Lowercase format identifier used for lookup (e.g. "json")
    name: ClassVar[str]

    #: True when the on-disk representation is bytes (spreadsheets)
    binary: ClassVar[bool] = False

    #: True when `decode` honours the reviver hook
    supports_reviver: ClassVar[bool] = False

    #: Other file extensions that carry this format; reported by `describe` only
    extensions: ClassVar[tuple[str, ...]] = ()

    _sealed: bool = False

    def __init__(self, **options: Any) -> None:
        for key, value in options.items():
            object.__setattr__(self, key, value)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, key: str, value: Any) -> None:
        if self._sealed:
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, key, value)

    @classmethod
    def from_settings(cls, settings: Any) -> "BaseCodec":
        """Build an instance from a `FormatKitSettings`; codecs with knobs override this."""
        return cls()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"

    @property
    def encoding(self) -> str:
        return "binary" if self.binary else "utf-8"

    @abstractmethod
    def encode(self, value: Any) -> str | bytes:
        """Serialize `value` to this format's text (or bytes for binary formats)."""

    @abstractmethod
    def decode(self, text: str | bytes, reviver: Reviver | None = None) -> Any:
        """Parse `text` into a structured value."""

    def describe(self) -> CodecInfo:
        doc = (type(self).__doc__ or "").strip()
        return CodecInfo(
            name=self.name,
            binary=self.binary,
            supports_reviver=self.supports_reviver,
            extensions=self.extensions,
            encoding=self.encoding,
            description=doc.splitlines()[0] if doc else "No description.",
        )

    # ----------------------------------------------------------------------
    # Reviver helper
    # ----------------------------------------------------------------------
    @staticmethod
    def revive(value: Any, reviver: Reviver | None) -> Any:
        """Apply `reviver` to every key/value pair of a decoded tree.

        Children are visited before their parents. Mapping entries receive
        their key, list items their integer index and the root the key "".
        The reviver's return value replaces the original value.
        """
        if reviver is None:
            return value

        def _walk(key: Any, node: Any) -> Any:
            if isinstance(node, Mapping):
                node = {k: _walk(k, v) for k, v in node.items()}
            elif isinstance(node, list):
                node = [_walk(i, item) for i, item in enumerate(node)]
            return reviver(key, node)

        return _walk("", value)
