"""Combine defaults, overrides and the environment into Settings.

Precedence, highest first:

1. ``RTX_MISSING_RUNTIME_BEHAVIOR`` (only for ``missing_runtime_behavior``,
   and only when it holds a recognized token)
2. Fields set on the ``SettingsOverrides`` passed to ``resolve``
3. Built-in defaults, computed once per resolver
"""

from rtx_settings.config.models import MissingRuntimeBehavior, Settings, SettingsOverrides
from rtx_settings.env import RtxEnv
from rtx_settings.observability.logging import get_logger


class SettingsResolver:
    """Resolves overrides into a fully populated Settings value.

    Resolution never fails: unrecognized environment input and unset
    overrides fall through to the next layer.
    """

    def __init__(
        self,
        defaults: Settings | None = None,
        env: RtxEnv | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            defaults: Bottom layer; ``Settings.defaults()`` when omitted
            env: Environment snapshot; read fresh on every resolve when omitted
        """
        self._defaults = defaults if defaults is not None else Settings.defaults()
        self._env = env

    @property
    def defaults(self) -> Settings:
        return self._defaults

    def resolve(self, overrides: SettingsOverrides) -> Settings:
        """Build Settings from the defaults, ``overrides`` and the environment.

        Args:
            overrides: Merged overrides from all explicit sources

        Returns:
            New Settings instance
        """
        logger = get_logger(__name__)
        env = self._env if self._env is not None else RtxEnv()

        values = self._defaults.model_dump()
        values.update(overrides.model_dump(exclude_none=True))
        values["missing_runtime_behavior"] = self._missing_runtime_behavior(
            env.missing_runtime_behavior,
            overrides.missing_runtime_behavior,
        )

        settings = Settings(**values)
        logger.debug(
            "settings_resolved",
            missing_runtime_behavior=str(settings.missing_runtime_behavior),
            overridden=[name for name, _ in overrides.iter_set()],
        )
        return settings

    def _missing_runtime_behavior(
        self,
        env_value: str | None,
        override: MissingRuntimeBehavior | None,
    ) -> MissingRuntimeBehavior:
        logger = get_logger(__name__)
        from_env = MissingRuntimeBehavior.from_token(env_value)
        if from_env is not None:
            logger.debug("missing_runtime_behavior_from_env", value=str(from_env))
            return from_env

        if env_value is not None:
            logger.debug("unrecognized_missing_runtime_behavior", value=env_value)

        if override is not None:
            return override
        return self._defaults.missing_runtime_behavior


def resolve(overrides: SettingsOverrides) -> Settings:
    """Resolve ``overrides`` against fresh defaults and the process environment."""
    return SettingsResolver().resolve(overrides)
