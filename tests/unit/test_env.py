"""Unit tests for RTX_* environment loading."""

import pytest

from rtx_settings.env import RtxEnv


class TestRtxEnv:
    """Tests for RtxEnv."""

    def test_absent(self) -> None:
        """Missing variable loads as None."""
        assert RtxEnv().missing_runtime_behavior is None

    def test_value_kept_verbatim(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The raw value is not normalized."""
        monkeypatch.setenv("RTX_MISSING_RUNTIME_BEHAVIOR", "WaRn")
        assert RtxEnv().missing_runtime_behavior == "WaRn"

    def test_any_value_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Arbitrary content never fails to load."""
        monkeypatch.setenv("RTX_MISSING_RUNTIME_BEHAVIOR", "{not: valid}")
        assert RtxEnv().missing_runtime_behavior == "{not: valid}"

    def test_unrelated_variables_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Other RTX_* variables are ignored."""
        monkeypatch.setenv("RTX_VERBOSE", "maybe")
        assert RtxEnv().missing_runtime_behavior is None

    def test_variable_name_case_sensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A lowercase variable name is not read."""
        monkeypatch.setenv("rtx_missing_runtime_behavior", "warn")
        assert RtxEnv().missing_runtime_behavior is None

    def test_injected_value_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicitly passed value wins over the process environment."""
        monkeypatch.setenv("RTX_MISSING_RUNTIME_BEHAVIOR", "ignore")
        assert RtxEnv(RTX_MISSING_RUNTIME_BEHAVIOR="warn").missing_runtime_behavior == "warn"
