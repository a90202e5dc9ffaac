from __future__ import annotations

from askedout.shared.config import AppConfig
from askedout.shared.logging import sanitize_message


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SESSION_TOKEN_TTL", raising=False)

    config = AppConfig()

    assert config.session.token_ttl_seconds == 7 * 24 * 60 * 60
    assert config.security.allowed_origins == ["*"]
    assert config.is_production() is False


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SESSION_TOKEN_TTL", "60")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("STORAGE_URL", "sqlite:///tmp/test.db")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.session.token_ttl_seconds == 60
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.storage.url == "sqlite:///tmp/test.db"
    assert config.debug_logging is True
    assert config.log_level == "DEBUG"


def test_log_messages_redact_tokens() -> None:
    message = sanitize_message("login token=eyJ1c2VySWQiOiAiYWJjIn0= password=hunter22")

    assert "eyJ1c2VySWQiOiAiYWJjIn0" not in message
    assert "hunter22" not in message
