import json
from pathlib import Path

import pytest

from formatkit.api import reset_default_registry
from formatkit.codecs import BaseCodec, CodecRegistry
from formatkit.conf import clear_settings_cache

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class EchoCodec(BaseCodec):
    """Echo codec used by registry tests."""

    name = "echo"

    def encode(self, value):
        return repr(value)

    def decode(self, text, reviver=None):
        return {"text": text}


class CountingCodec(BaseCodec):
    """Records every decode call in the `calls` list it was built with."""

    name = "counting"
    supports_reviver = True

    def __init__(self, calls: list) -> None:
        super().__init__(calls=calls)

    def encode(self, value):
        return str(value)

    def decode(self, text, reviver=None):
        self.calls.append(text)
        return self.revive({"text": text}, reviver)


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch):
    """Each test sees package defaults and rebuilds the default registry."""
    for key in ("FORMATKIT_FORMATS", "FORMATKIT_STRICT_REVIVER", "FORMATKIT_SETTINGS_MODULE"):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    reset_default_registry()
    yield
    clear_settings_cache()
    reset_default_registry()


@pytest.fixture
def product_set():
    return json.loads((FIXTURES / "product-set.json").read_text(encoding="utf-8"))


@pytest.fixture
def registry():
    return CodecRegistry.with_builtins()


@pytest.fixture
def echo_registry():
    return CodecRegistry([EchoCodec()])
