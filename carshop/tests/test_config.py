from __future__ import annotations

import pytest
from pydantic import ValidationError

from carshop.shared.config import DEFAULT_ALLOWED_ORIGINS, AppConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "SECRET_KEY", "ALLOWED_ORIGINS", "COOKIE_SAMESITE", "COOKIE_SECURE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig()

    assert config.port == 3030
    assert config.default_score == 100
    assert config.cookie_name == "loginToken"
    assert config.cookie_samesite is None
    assert config.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert config.is_sqlite() is True
    assert config.is_production() is False


def test_env_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("COOKIE_SAMESITE", "none")
    monkeypatch.setenv("COOKIE_SECURE", "yes")

    config = AppConfig()

    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.cookie_samesite is None
    assert config.cookie_secure is True


def test_config_is_immutable() -> None:
    config = AppConfig()
    with pytest.raises(ValidationError):
        config.port = 1  # type: ignore[misc]


def test_production_rejects_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", secret_key="dev")


def test_production_security_warnings() -> None:
    config = AppConfig(
        app_env="production",
        secret_key="a-long-and-random-production-secret",
        allowed_origins=["*"],
        cookie_secure=True,
    )

    warnings = config.security_warnings()

    assert any("JavaScript" in warning for warning in warnings)
    assert any("any origin" in warning for warning in warnings)
    assert not any("plain HTTP" in warning for warning in warnings)
