"""Tests for CLI-flag settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from idiomctl.config.settings import IdiomSettings


class TestIdiomSettings:
    def test_defaults(self) -> None:
        s = IdiomSettings.from_cli()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.log_json is False

    def test_flags(self) -> None:
        s = IdiomSettings.from_cli(json_output=True, verbose=True)
        assert s.json_output is True
        assert s.verbose is True

    def test_frozen(self) -> None:
        s = IdiomSettings.from_cli()
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]

    def test_unknown_flag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IdiomSettings.from_cli(no_such_flag=True)

    def test_environment_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IDIOMCTL_VERBOSE", "1")
        monkeypatch.setenv("VERBOSE", "1")
        assert IdiomSettings.from_cli().verbose is False
