"""Fully resolved settings model."""

from collections.abc import Callable
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from rtx_settings.config.models.enums import MissingRuntimeBehavior
from rtx_settings.plugins import AliasMap
from rtx_settings.ui.prompt import is_tty

DEFAULT_LAST_CHECK_DURATION = timedelta(days=7)


class Settings(BaseModel):
    """Effective configuration consumed by the rest of the tool.

    Every field is always populated. Instances are frozen; build them through
    ``SettingsResolver`` (or ``Settings.defaults`` for the bottom layer).
    """

    model_config = ConfigDict(frozen=True)

    missing_runtime_behavior: MissingRuntimeBehavior = Field(
        default=MissingRuntimeBehavior.PROMPT,
        description="Reaction to a missing runtime version",
    )
    always_keep_download: bool = Field(
        default=False,
        description="Keep downloaded archives after install",
    )
    legacy_version_file: bool = Field(
        default=True,
        description="Read legacy version files such as .node-version",
    )
    disable_plugin_short_name_repository: bool = Field(
        default=False,
        description="Disable the plugin short-name repository",
    )
    plugin_autoupdate_last_check_duration: timedelta = Field(
        default=DEFAULT_LAST_CHECK_DURATION,
        ge=timedelta(0),
        description="Interval between plugin autoupdate checks",
    )
    plugin_repository_last_check_duration: timedelta = Field(
        default=DEFAULT_LAST_CHECK_DURATION,
        ge=timedelta(0),
        description="Interval between plugin repository refreshes",
    )
    aliases: AliasMap = Field(
        default_factory=dict,
        description="Version aliases per plugin",
    )
    verbose: bool = Field(
        default_factory=lambda: not is_tty(),
        description="Verbose output; defaults on when not attached to a terminal",
    )

    @classmethod
    def defaults(cls, is_tty: Callable[[], bool] = is_tty) -> "Settings":
        """Build the built-in default settings.

        The terminal check runs once, here; the result is baked into
        ``verbose``.

        Args:
            is_tty: Capability reporting whether the session is interactive

        Returns:
            Settings holding only built-in defaults
        """
        return cls(verbose=not is_tty())
