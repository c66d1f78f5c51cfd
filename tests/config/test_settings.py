"""Tests for MedeaSettings construction from CLI flags."""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from medea.config.settings import MedeaSettings, detect_color


class TestFromCli:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        settings = MedeaSettings.from_cli(stream=io.StringIO())
        assert settings.colors is False
        assert settings.trim is False
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_forced_colors(self) -> None:
        assert MedeaSettings.from_cli(colors=True, stream=io.StringIO()).colors is True

    def test_disabled_colors(self) -> None:
        assert MedeaSettings.from_cli(colors=False).colors is False

    def test_flags(self) -> None:
        settings = MedeaSettings.from_cli(colors=False, trim=True, json_output=True, verbose=True)
        assert settings.trim and settings.json_output and settings.verbose

    def test_frozen(self) -> None:
        settings = MedeaSettings.from_cli(colors=False)
        with pytest.raises(ValidationError):
            settings.trim = True  # type: ignore[misc]


class TestDetectColor:
    def test_non_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        assert detect_color(io.StringIO()) is False

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        assert detect_color(io.StringIO()) is False


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestPerStreamColor:
    @pytest.fixture(autouse=True)
    def _color_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")

    def test_stderr_terminal_stdout_pipe(self) -> None:
        settings = MedeaSettings.from_cli(stream=io.StringIO(), err_stream=_TtyStream())
        assert settings.colors is False
        assert settings.stderr_colors is True

    def test_stdout_terminal_stderr_redirected(self) -> None:
        settings = MedeaSettings.from_cli(stream=_TtyStream(), err_stream=io.StringIO())
        assert settings.colors is True
        assert settings.stderr_colors is False

    def test_flag_forces_both(self) -> None:
        settings = MedeaSettings.from_cli(colors=False, err_stream=_TtyStream())
        assert settings.stderr_colors is False
        assert MedeaSettings.from_cli(colors=True).stderr_colors is True

    def test_detect_defaults_to_stderr_when_asked(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stderr", _TtyStream())
        monkeypatch.setattr("sys.stdout", io.StringIO())
        assert detect_color(stderr=True) is True
        assert detect_color() is False
