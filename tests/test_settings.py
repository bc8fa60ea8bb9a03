import sys
import types

import pytest
from pydantic import ValidationError

from formatkit.codecs import CodecRegistry
from formatkit.codecs.exceptions import CodecNotFoundError, ReviverNotSupportedError
from formatkit.conf import BUILTIN_FORMATS, FormatKitSettings, Settings, get_settings, strip_namespace


def _settings_module(monkeypatch, **names):
    module = types.ModuleType("formatkit_test_settings")
    for key, value in names.items():
        setattr(module, key, value)
    monkeypatch.setitem(sys.modules, module.__name__, module)
    return module


def test_strip_namespace_keeps_prefixed_names():
    mapping = {"FORMATKIT_XML_ROOT_TAG": "doc", "OTHER_XML_ROOT_TAG": "nope", "FORMATKIT_UNKNOWN": 1}

    assert strip_namespace(mapping) == {"XML_ROOT_TAG": "doc", "UNKNOWN": 1}
    assert strip_namespace(mapping, known={"XML_ROOT_TAG"}) == {"XML_ROOT_TAG": "doc"}


def test_settings_fall_back_to_defaults():
    settings = Settings()

    assert settings["FORMATS"] == BUILTIN_FORMATS
    assert settings.source_of("SHEET_NAME") == "defaults"
    with pytest.raises(KeyError):
        settings.source_of("NOPE")


def test_environment_layer_beats_settings_module(monkeypatch):
    module = _settings_module(monkeypatch, FORMATKIT_SHEET_NAME="Data", FORMATKIT_CSV_DIALECT="excel-tab")
    settings = Settings()

    settings.load_module(module.__name__)
    settings.load_environ({"FORMATKIT_SHEET_NAME": "Export", "HOME": "/root"})

    assert settings["SHEET_NAME"] == "Export"
    assert settings.source_of("SHEET_NAME") == "environment"
    assert settings["CSV_DIALECT"] == "excel-tab"
    assert settings.source_of("CSV_DIALECT") == "settings module"
    assert "HOME" not in settings.as_dict()


def test_settings_module_envvar_unset_loads_nothing():
    settings = Settings()

    assert settings.load_envvar_module() is None
    assert settings.module == {}


def test_get_settings_defaults():
    settings = get_settings()

    assert settings.FORMATS == BUILTIN_FORMATS
    assert settings.STRICT_REVIVER is False
    assert get_settings() is settings


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FORMATKIT_FORMATS", "json, .YAML")
    monkeypatch.setenv("FORMATKIT_STRICT_REVIVER", "true")

    settings = get_settings()

    assert settings.FORMATS == ("json", "yaml")
    assert settings.STRICT_REVIVER is True


def test_unknown_format_in_settings_is_rejected():
    with pytest.raises(ValidationError):
        FormatKitSettings(FORMATS="json,bogus")


def test_settings_module_is_loaded_from_envvar(monkeypatch):
    module = _settings_module(monkeypatch, FORMATKIT_FORMATS=("json", "xml"), FORMATKIT_XML_ROOT_TAG="doc")
    monkeypatch.setenv("FORMATKIT_SETTINGS_MODULE", module.__name__)
    monkeypatch.setenv("FORMATKIT_FORMATS", "json")

    settings = get_settings()

    assert settings.XML_ROOT_TAG == "doc"
    # environment wins over the settings module
    assert settings.FORMATS == ("json",)


def test_with_builtins_subset():
    registry = CodecRegistry.with_builtins(["json", "yaml"])

    assert registry.names() == ("json", "yaml")


def test_with_builtins_rejects_unknown_names():
    with pytest.raises(CodecNotFoundError) as exc_info:
        CodecRegistry.with_builtins(["json", "toml"])

    assert exc_info.value.format == "toml"


def test_with_builtins_passes_codec_knobs():
    settings = FormatKitSettings(FORMATS=("xml",), XML_ROOT_TAG="doc")

    registry = CodecRegistry.with_builtins(settings=settings)

    assert registry.encode(1, "xml").splitlines()[1] == "<doc>"
    assert registry.decode("xml", registry.encode([1, "a"], "xml")) == [1, "a"]


def test_strict_reviver_from_environment(monkeypatch):
    monkeypatch.setenv("FORMATKIT_STRICT_REVIVER", "1")

    registry = CodecRegistry.with_builtins(["yaml", "json"])

    with pytest.raises(ReviverNotSupportedError):
        registry.decode("yaml", "a: 1", lambda k, v: v)
    assert registry.decode("json", '{"a": 1}', lambda k, v: v) == {"a": 1}
