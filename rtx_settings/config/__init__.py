"""Settings resolution for rtx.

Settings are layered from built-in defaults, explicit overrides and the
RTX_MISSING_RUNTIME_BEHAVIOR environment variable.

Usage:
    from rtx_settings.config import build_settings, get_settings

    settings = get_settings()
    custom = build_settings(file_overrides, flag_overrides)
"""

from functools import lru_cache

from rtx_settings.config.models import Settings, SettingsOverrides
from rtx_settings.config.resolver import SettingsResolver


def build_settings(
    *layers: SettingsOverrides,
    resolver: SettingsResolver | None = None,
) -> Settings:
    """Merge override layers and resolve them once.

    Args:
        *layers: Overrides in increasing priority order; later layers win
        resolver: Resolver to use; a fresh one when omitted

    Returns:
        Resolved Settings
    """
    overrides = SettingsOverrides()
    for layer in layers:
        overrides.merge(layer)

    if resolver is None:
        resolver = SettingsResolver()
    return resolver.resolve(overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings built from defaults and the environment.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` or `reload_settings()` to rebuild.
    """
    return build_settings()


def reload_settings() -> Settings:
    """Clear the settings cache and rebuild."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["SettingsResolver", "build_settings", "get_settings", "reload_settings"]
