"""
Settings sources, highest priority first:

    FORMATKIT_* environment variables
    the module named by FORMATKIT_SETTINGS_MODULE (its FORMATKIT_* names)
    DEFAULTS

`Settings` keeps one ChainMap layer per source, so lookups resolve in that
order and `source_of(name)` reports which layer a value came from.
"""

import importlib
import os
from collections import ChainMap
from collections.abc import Container, Mapping
from typing import Any

from .defaults import DEFAULTS, NAMESPACE, SETTINGS_MODULE_ENVVAR


def strip_namespace(
    mapping: Mapping[str, Any],
    namespace: str = NAMESPACE,
    *,
    known: Container[str] | None = None,
) -> dict[str, Any]:
    """Return `NAMESPACE_NAME` entries keyed by `NAME`, optionally only the `known` names."""
    prefix = f"{namespace}_"
    output: dict[str, Any] = {}
    for key, value in mapping.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        if known is None or name in known:
            output[name] = value
    return output


class Settings(ChainMap):
    """Environment layer, settings-module layer, then a copy of DEFAULTS."""

    SOURCES = ("environment", "settings module", "defaults")

    def __init__(self) -> None:
        super().__init__({}, {}, dict(DEFAULTS))

    @property
    def environment(self) -> dict[str, Any]:
        return self.maps[0]

    @property
    def module(self) -> dict[str, Any]:
        return self.maps[1]

    def load_module(self, module_name: str, *, namespace: str = NAMESPACE) -> None:
        module = importlib.import_module(module_name)
        self.module.update(strip_namespace(vars(module), namespace))

    def load_envvar_module(self, envvar: str = SETTINGS_MODULE_ENVVAR, *, namespace: str = NAMESPACE) -> str | None:
        """Load the module named by `envvar`, if set; return its name."""
        module_name = os.environ.get(envvar)
        if not module_name:
            return None
        self.load_module(module_name, namespace=namespace)
        return module_name

    def load_environ(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        namespace: str = NAMESPACE,
        known: Container[str] | None = None,
    ) -> None:
        # Values stay strings; FormatKitSettings coerces them
        source = os.environ if environ is None else environ
        self.environment.update(strip_namespace(source, namespace, known=known))

    def source_of(self, name: str) -> str:
        for source, layer in zip(self.SOURCES, self.maps):
            if name in layer:
                return source
        raise KeyError(name)

    def as_dict(self) -> dict[str, Any]:
        return dict(self)
