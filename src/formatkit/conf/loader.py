# formatkit/conf/loader.py

import logging
from functools import lru_cache

from .defaults import NAMESPACE
from .models import FormatKitSettings
from .settings import Settings

logger = logging.getLogger(__name__)

__all__ = ["NAMESPACE", "get_settings", "clear_settings_cache"]


@lru_cache(maxsize=1)
def get_settings() -> FormatKitSettings:
    """Load and cache formatkit settings.

    Sources (last wins):
      - package defaults
      - the module named by `FORMATKIT_SETTINGS_MODULE` (its `FORMATKIT_*` names)
      - environment variables, e.g. `FORMATKIT_FORMATS=json,yaml`
    """
    settings = Settings()
    module_name = settings.load_envvar_module()
    settings.load_environ(known=FormatKitSettings.model_fields)
    logger.debug(
        "formatkit.settings.loaded module=%s env=%s",
        module_name,
        ",".join(sorted(settings.environment)),
    )
    return FormatKitSettings(**settings.as_dict())


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for tests)."""
    get_settings.cache_clear()
