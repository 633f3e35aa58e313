# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]

_WEAK_SECRETS = frozenset({"", "dev", "development", "test", "secret", "changeme"})

DEFAULT_ALLOWED_ORIGINS = [
    "http://127.0.0.1:8080",
    "http://localhost:8080",
    "http://127.0.0.1:5173",
    "http://localhost:5173",
]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    port: int = Field(3030, alias="PORT", ge=1, le=65535)

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    database_url: str = Field("sqlite:///carshop.db", alias="DATABASE_URL")
    database_pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    database_pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    default_score: int = Field(100, ge=0, alias="DEFAULT_SCORE")
    public_dir: Path = Field(_PACKAGE_ROOT / "public", alias="PUBLIC_DIR")

    # Cookie attributes default to the browser defaults (no SameSite, readable by JS)
    cookie_name: str = Field("loginToken", alias="COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_httponly: bool = Field(False, alias="COOKIE_HTTPONLY")
    cookie_samesite: str | None = Field(None, alias="COOKIE_SAMESITE")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS), alias="ALLOWED_ORIGINS"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        validate_by_name=True,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator(
        "debug_logging", "metrics_enabled", "cookie_secure", "cookie_httponly", mode="before"
    )
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("cookie_samesite", mode="before")
    @classmethod
    def _parse_samesite(cls, value: str | None) -> str | None:
        if isinstance(value, str) and value.strip().lower() in ("", "none"):
            return None
        return value

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in _WEAK_SECRETS or len(self.secret_key) < 16:
            print(
                "\nSECRET_KEY is missing or weak; it signs every login token.\n"
                "Set a long random value, e.g. secrets.token_urlsafe(32). Refusing to start.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        for warning in self.security_warnings():
            print(f"[carshop] production warning: {warning}", file=sys.stderr)
        return self

    def security_warnings(self) -> list[str]:
        checks = {
            "login cookie is sent over plain HTTP (COOKIE_SECURE=false)": not self.cookie_secure,
            "login cookie is readable from JavaScript (COOKIE_HTTPONLY=false)": (
                not self.cookie_httponly
            ),
            "CORS allows any origin": "*" in self.allowed_origins,
        }
        return [message for message, failed in checks.items() if failed]

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DEFAULT_ALLOWED_ORIGINS", "load_config"]
