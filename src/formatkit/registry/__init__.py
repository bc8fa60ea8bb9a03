"""Generic component registry used by the codec layer."""

from .base import BaseRegistry
from .exceptions import (
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryError,
    RegistryFrozenError,
    RegistryLookupError,
)

__all__ = [
    "BaseRegistry",
    "RegistryError",
    "RegistryDuplicateError",
    "RegistryCollisionError",
    "RegistryLookupError",
    "RegistryFrozenError",
]
