"""Partial settings overrides that can be layered before resolution."""

from collections.abc import Iterator
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rtx_settings.config.models.enums import MissingRuntimeBehavior
from rtx_settings.plugins import AliasMap


class SettingsOverrides(BaseModel):
    """Explicitly requested settings changes, one optional value per field.

    A field left as None is unset and inherits from the next layer down.
    Overrides from several sources are combined with ``merge`` in increasing
    priority order, then handed to the resolver once.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    missing_runtime_behavior: MissingRuntimeBehavior | None = Field(default=None)
    always_keep_download: bool | None = Field(default=None)
    legacy_version_file: bool | None = Field(default=None)
    disable_plugin_short_name_repository: bool | None = Field(default=None)
    plugin_autoupdate_last_check_duration: timedelta | None = Field(
        default=None,
        ge=timedelta(0),
    )
    plugin_repository_last_check_duration: timedelta | None = Field(
        default=None,
        ge=timedelta(0),
    )
    aliases: AliasMap | None = Field(default=None)
    verbose: bool | None = Field(default=None)

    def is_set(self, name: str) -> bool:
        """Return True if the named field carries a value.

        Raises:
            AttributeError: If ``name`` is not an override field
        """
        if name not in type(self).model_fields:
            raise AttributeError(f"Unknown settings field: {name}")
        return getattr(self, name) is not None

    def iter_set(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(name, value)`` for each set field in declaration order."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None:
                yield name, value

    def merge(self, other: "SettingsOverrides") -> "SettingsOverrides":
        """Overlay every set field of ``other`` onto this instance.

        Unset fields in ``other`` leave this instance untouched. ``aliases``
        is replaced as a whole, not merged per plugin.

        Args:
            other: Higher-priority overrides

        Returns:
            This instance, for chaining
        """
        for name, value in other.iter_set():
            setattr(self, name, value)
        return self
