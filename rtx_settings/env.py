"""Process environment inputs for the settings resolver."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RtxEnv(BaseSettings):
    """RTX_* environment variables consulted while resolving settings.

    Only ``RTX_MISSING_RUNTIME_BEHAVIOR`` is read here, with its name matched
    exactly. The raw string is kept as-is; decoding into a behavior happens in
    the resolver so that any value, valid or not, loads without error.

    Pass the variable name to inject a value directly:
    ``RtxEnv(RTX_MISSING_RUNTIME_BEHAVIOR="warn")``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    missing_runtime_behavior: str | None = Field(
        default=None,
        validation_alias="RTX_MISSING_RUNTIME_BEHAVIOR",
        description="Raw RTX_MISSING_RUNTIME_BEHAVIOR value",
    )
