"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from src.app.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HOST", "PORT", "LOG_LEVEL", "ACCESS_LOG"):
        monkeypatch.delenv(name, raising=False)

    cfg = Settings(_env_file=None)
    assert cfg.host == "0.0.0.0"
    assert cfg.port == 3000
    assert cfg.log_level == "INFO"
    assert cfg.access_log is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("ACCESS_LOG", "false")

    cfg = Settings(_env_file=None)
    assert cfg.port == 8080
    assert cfg.log_level == "DEBUG"
    assert cfg.access_log is False


@pytest.mark.parametrize("port", ["0", "70000", "http"])
def test_invalid_port_rejected(monkeypatch: pytest.MonkeyPatch, port: str) -> None:
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_invalid_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
