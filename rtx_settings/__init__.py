"""rtx_settings: layered settings resolution for the rtx runtime manager.

Usage:
    from rtx_settings import get_settings

    settings = get_settings()
    if settings.missing_runtime_behavior is MissingRuntimeBehavior.AUTOINSTALL:
        ...
"""

from rtx_settings.config import build_settings, get_settings, reload_settings
from rtx_settings.config.models import (
    MissingRuntimeBehavior,
    Settings,
    SettingsOverrides,
)

__version__ = "0.1.0"

__all__ = [
    "MissingRuntimeBehavior",
    "Settings",
    "SettingsOverrides",
    "build_settings",
    "get_settings",
    "reload_settings",
    "__version__",
]
