"""Render resolved settings as ordered string pairs for display and export.

Aliases are structured rather than scalar and are left out.
"""

from datetime import timedelta

from rtx_settings.config.models import Settings

_MINUTE = timedelta(minutes=1)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _format_minutes(value: timedelta) -> str:
    # Durations are non-negative, so flooring truncates the leftover seconds
    return str(value // _MINUTE)


def to_ordered_pairs(settings: Settings) -> list[tuple[str, str]]:
    """Return ``(key, value)`` string pairs in field declaration order.

    Args:
        settings: Resolved settings

    Returns:
        Pairs for every scalar setting
    """
    return [
        ("missing_runtime_behavior", str(settings.missing_runtime_behavior)),
        ("always_keep_download", _format_bool(settings.always_keep_download)),
        ("legacy_version_file", _format_bool(settings.legacy_version_file)),
        (
            "disable_plugin_short_name_repository",
            _format_bool(settings.disable_plugin_short_name_repository),
        ),
        (
            "plugin_autoupdate_last_check_duration",
            _format_minutes(settings.plugin_autoupdate_last_check_duration),
        ),
        (
            "plugin_repository_last_check_duration",
            _format_minutes(settings.plugin_repository_last_check_duration),
        ),
        ("verbose", _format_bool(settings.verbose)),
    ]


def to_index_map(settings: Settings) -> dict[str, str]:
    """Same as ``to_ordered_pairs`` but as an insertion-ordered dict."""
    return dict(to_ordered_pairs(settings))


def format_settings(settings: Settings) -> str:
    """Render one ``key = value`` line per setting."""
    return "\n".join(f"{key} = {value}" for key, value in to_ordered_pairs(settings))
