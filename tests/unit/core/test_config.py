"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RosterConfig
from core.errors import RosterConfigError


def test_from_env_defaults_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should use built-in entries and warning level by default."""
    monkeypatch.delenv("ROSTER_INPUT_PATH", raising=False)
    monkeypatch.delenv("ROSTER_LOG_LEVEL", raising=False)

    config = RosterConfig.from_env()

    assert config.input_path is None and config.log_level == "warning"


def test_from_env_reads_input_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve input path from environment."""
    monkeypatch.setenv("ROSTER_INPUT_PATH", "./entries.yaml")

    config = RosterConfig.from_env()

    assert config.input_path is not None
    assert config.input_path.name == "entries.yaml"


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Level names should be case-insensitive."""
    monkeypatch.setenv("ROSTER_LOG_LEVEL", " DEBUG ")

    assert RosterConfig.from_env().log_level == "debug"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown log levels."""
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "verbose")

    with pytest.raises(RosterConfigError):
        RosterConfig.from_env()
