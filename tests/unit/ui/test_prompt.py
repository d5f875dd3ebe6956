"""Unit tests for terminal detection."""

import io
import sys

import pytest

from rtx_settings.ui.prompt import is_tty


class _FakeTTY(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestIsTTY:
    """Tests for is_tty."""

    def test_interactive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A terminal stdin is interactive."""
        monkeypatch.setattr(sys, "stdin", _FakeTTY())
        assert is_tty() is True

    def test_pipe(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A non-terminal stdin is not interactive."""
        monkeypatch.setattr(sys, "stdin", io.StringIO())
        assert is_tty() is False

    def test_missing_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No stdin at all is not interactive."""
        monkeypatch.setattr(sys, "stdin", None)
        assert is_tty() is False

    def test_closed_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A closed stdin is not interactive."""
        stream = io.StringIO()
        stream.close()
        monkeypatch.setattr(sys, "stdin", stream)
        assert is_tty() is False
