"""Settings for runconf.

Usage:
    from runconf.config import get_settings

    settings = get_settings()
    tag = settings.system_tag
"""

from functools import lru_cache

from runconf.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Settings are read from Pydantic model defaults, overridden by RUNCONF_*
    environment variables. The result is cached for the lifetime of the
    process; call ``reload_settings()`` to re-read the environment.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
