"""Shared test fixtures for the rtx_settings test suite."""

from collections.abc import Callable, Generator

import pytest
import structlog

from rtx_settings.config.models import Settings
from rtx_settings.config.resolver import SettingsResolver
from rtx_settings.env import RtxEnv


@pytest.fixture(autouse=True)
def clean_rtx_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove RTX_* variables from the process environment for each test."""
    for name in ("RTX_MISSING_RUNTIME_BEHAVIOR", "RTX_LOG_LEVEL", "RTX_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from rtx_settings.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog to its unconfigured state around each test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def tty_defaults() -> Settings:
    """Defaults as computed on an interactive terminal."""
    return Settings.defaults(is_tty=lambda: True)


@pytest.fixture
def make_resolver(tty_defaults: Settings) -> Callable[[str | None], SettingsResolver]:
    """Factory fixture for a resolver with a fixed environment value.

    Usage:
        def test_something(make_resolver):
            resolver = make_resolver("warn")
    """

    def _make_resolver(env_value: str | None = None) -> SettingsResolver:
        return SettingsResolver(
            defaults=tty_defaults,
            env=RtxEnv(RTX_MISSING_RUNTIME_BEHAVIOR=env_value),
        )

    return _make_resolver
