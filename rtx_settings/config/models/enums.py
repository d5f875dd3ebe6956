"""Enums for settings values."""

from enum import Enum


class MissingRuntimeBehavior(str, Enum):
    """What to do when a requested runtime version is not installed.

    - AUTOINSTALL: Install it without asking
    - PROMPT: Ask the user before installing
    - WARN: Print a warning and continue
    - IGNORE: Continue silently
    """

    AUTOINSTALL = "autoinstall"
    PROMPT = "prompt"
    WARN = "warn"
    IGNORE = "ignore"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, value: str | None) -> "MissingRuntimeBehavior | None":
        """Decode a lowercase token, returning None when it is not recognized.

        Matching is case-sensitive: ``"warn"`` decodes, ``"WARN"`` does not.

        Args:
            value: Raw token, typically read from the environment

        Returns:
            The matching behavior, or None for absent or unknown tokens
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None
