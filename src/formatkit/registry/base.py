# formatkit/registry/base.py


import logging
from threading import RLock
from typing import Any, Callable, Generic, Literal, TypeVar, overload

from asgiref.sync import sync_to_async

from .exceptions import (
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class BaseRegistry(Generic[K, T]):
    """Thread-safe registry keyed by a coerced key K storing component instances of T."""

    def __init__(self, *, coerce_key: Callable[[Any], K], key_of: Callable[[T], Any]) -> None:
        self._coerce = coerce_key
        self._key_of = key_of
        self._lock = RLock()
        self._store: dict[K, T] = {}
        self._frozen = False

    def _register(self, obj: T) -> None:
        """Internal: register a component into the store."""
        key = self._coerce(self._key_of(obj))

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            if key in self._store:
                if self._store[key] is obj:
                    raise RegistryDuplicateError(f"Component already registered: {key}")
                raise RegistryCollisionError(
                    f"Key already registered to different instance: {key}"
                )
            self._store[key] = obj

    def _miss(self, key: Any) -> Exception:
        """Build the exception raised by :meth:`get` on a miss."""
        return RegistryLookupError(f"Component {key!r} not found or not registered")

    # --- registration ---

    def register(self, obj: T, *, strict: bool = False) -> T:
        """
        Register a component, handling duplicates based on the strict mode.

        Re-registering the very same object is ignored (and logged at debug
        level) unless `strict` is set, in which case `RegistryDuplicateError`
        is raised. Registering a *different* object under an existing key
        always raises `RegistryCollisionError`.

        :param obj: The component to be registered.
        :param strict: Raise on duplicate registration instead of ignoring it.
        :return: The registered component, for decorator-style use.
        """
        try:
            self._register(obj)
        except RegistryDuplicateError:
            if strict:
                raise
            logger.debug("Duplicate registration ignored: %s", obj)
        return obj

    # --- retrieval ---

    def get(self, key: Any) -> T:
        """
        Retrieve the component stored under `key`.

        :raises RegistryLookupError: (or the subclass returned by `_miss`) when
            nothing is registered under the coerced key.
        """
        k = self._coerce(key)
        with self._lock:
            try:
                return self._store[k]
            except KeyError:
                raise self._miss(key) from None

    async def aget(self, key: Any) -> T:
        """Async wrapper around `get`."""
        return await sync_to_async(self.get)(key)

    def try_get(self, key: Any) -> T | None:
        """Like `get`, but return None instead of raising on a miss."""
        try:
            return self.get(key)
        except RegistryLookupError:
            return None

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._coerce(key) in self._store

    # --- counting ---

    def count(self) -> int:
        """Counts the number of registered components in the store."""
        with self._lock:
            return len(self._store)

    def __len__(self) -> int:
        return self.count()

    # --- enumerate all entries ---

    def all(self) -> tuple[T, ...]:
        """Return all registered components in registration order."""
        with self._lock:
            return tuple(self._store.values())

    @overload
    def keys(self) -> tuple[K, ...]: ...
    @overload
    def keys(self, *, as_csv: Literal[True]) -> str: ...
    @overload
    def keys(self, *, as_csv: Literal[False]) -> tuple[K, ...]: ...

    def keys(self, *, as_csv: bool = False):
        """
        Return all registered keys.

        When `as_csv` is True, returns a comma-separated string of the keys for
        logging/debugging purposes.
        """
        with self._lock:
            keys_tuple: tuple[K, ...] = tuple(self._store.keys())

        if as_csv:
            return ",".join(str(k) for k in keys_tuple)
        return keys_tuple

    # --- mutation / control ---

    def clear(self) -> None:
        """Clear the registry if not frozen."""
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.clear()

    def freeze(self) -> None:
        """Mark the registry as frozen (no further mutations)."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen
