# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_NESTED_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


class StorageConfig(BaseSettings):
    url: str = Field("sqlite:///instance/askedout.db", alias="STORAGE_URL")
    pool_timeout: float = Field(30.0, ge=0.1, alias="STORAGE_POOL_TIMEOUT")

    model_config = _NESTED_SETTINGS


class SessionConfig(BaseSettings):
    token_ttl_seconds: int = Field(60 * 60 * 24 * 7, ge=1, alias="SESSION_TOKEN_TTL")

    model_config = _NESTED_SETTINGS


class QuestionsConfig(BaseSettings):
    question_max_length: int = Field(1000, ge=1, alias="QUESTION_MAX_LENGTH")
    answer_max_length: int = Field(2000, ge=1, alias="ANSWER_MAX_LENGTH")

    model_config = _NESTED_SETTINGS


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _NESTED_SETTINGS

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _storage_config_factory() -> StorageConfig:
    return StorageConfig()  # type: ignore[call-arg]


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _questions_config_factory() -> QuestionsConfig:
    return QuestionsConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    storage: StorageConfig = Field(default_factory=_storage_config_factory)
    session: SessionConfig = Field(default_factory=_session_config_factory)
    questions: QuestionsConfig = Field(default_factory=_questions_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _warn_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        # Tokens are reversible base64 and passwords are never checked.
        print(
            "\n⚠️  askedout uses a simulated session token scheme with no password checks.\n"
            "   Do not expose this deployment to untrusted users.\n",
            file=sys.stderr,
        )
        if "*" in self.security.allowed_origins:
            print("   ⚠️  CORS allows wildcard (*) origins\n", file=sys.stderr)
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "QuestionsConfig",
    "SecurityConfig",
    "SessionConfig",
    "StorageConfig",
    "load_config",
]
