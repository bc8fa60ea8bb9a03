# formatkit/conf/__init__.py

from .defaults import BUILTIN_FORMATS, DEFAULTS, NAMESPACE, SETTINGS_MODULE_ENVVAR
from .loader import clear_settings_cache, get_settings
from .models import FormatKitSettings
from .settings import Settings, strip_namespace

__all__ = [
    "BUILTIN_FORMATS",
    "DEFAULTS",
    "NAMESPACE",
    "SETTINGS_MODULE_ENVVAR",
    "FormatKitSettings",
    "Settings",
    "strip_namespace",
    "get_settings",
    "clear_settings_cache",
]
