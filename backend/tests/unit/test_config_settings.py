"""Unit tests for application settings configuration."""

from pathlib import Path

from sidak.config import Settings
from sidak.infrastructure.database.session import _get_async_url


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_policy_flag_can_be_set_from_environment(monkeypatch):
    monkeypatch.setenv("POLICY_UNSCOPED_ACCESS", "false")
    monkeypatch.setenv("AUTH_TOKEN_TTL_HOURS", "8")
    settings = Settings(_env_file=None)
    assert settings.policy_unscoped_access is False
    assert settings.auth_token_ttl_hours == 8


def test_async_url_conversion():
    assert _get_async_url("sqlite:///./sidak.db") == "sqlite+aiosqlite:///./sidak.db"
    assert _get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert _get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
