"""Settings model exports.

    from rtx_settings.config.models import Settings, SettingsOverrides
"""

from rtx_settings.config.models.enums import MissingRuntimeBehavior
from rtx_settings.config.models.overrides import SettingsOverrides
from rtx_settings.config.models.settings import DEFAULT_LAST_CHECK_DURATION, Settings

__all__ = [
    "DEFAULT_LAST_CHECK_DURATION",
    "MissingRuntimeBehavior",
    "Settings",
    "SettingsOverrides",
]
