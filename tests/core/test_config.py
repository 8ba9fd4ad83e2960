"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_multiple_origins_comma_separated(self) -> None:
        """Multiple comma-separated origins are parsed correctly."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            CORS_ORIGINS="http://localhost:3000,https://example.com",
        )
        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://example.com",
        ]

    def test_parse_origins_with_whitespace_and_trailing_comma(self) -> None:
        """Whitespace is stripped and empty entries are dropped."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            CORS_ORIGINS="  http://localhost:3000 , https://example.com,",
        )
        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://example.com",
        ]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            CORS_ORIGINS="",
        )
        assert settings.cors_origins == []

    def test_default_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default CORS origins is localhost:3000."""
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.cors_origins == ["http://localhost:3000"]


class TestLoggingConfig:
    """Tests for LOG_LEVEL handling."""

    def test_default_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL defaults to INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.log_level == "INFO"

    def test_log_level_is_normalized(self) -> None:
        """Lowercase level names are accepted and uppercased."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            LOG_LEVEL=" debug ",
        )
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        """Level names the logging module doesn't know are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(
                _env_file=None,
                database_url="postgresql+asyncpg://test",
                LOG_LEVEL="LOUD",
            )


class TestDatabaseConfig:
    """Tests for database settings."""

    def test_database_url_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings can't be built without DATABASE_URL."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_db_echo_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DB_ECHO is read from the environment."""
        monkeypatch.setenv("DB_ECHO", "true")
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://test")
        assert settings.db_echo is True
