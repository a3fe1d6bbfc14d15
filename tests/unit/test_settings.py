"""
Unit tests for application settings.
"""

import pytest

from src.config.settings import Settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when no environment variables are set."""
        for name in ("DATABASE_URL", "BCRYPT_COST", "EMAIL_CHECK_DELIVERABILITY"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("postgresql://")
        assert settings.pool_min_size == 2
        assert settings.pool_max_size == 10
        assert settings.bcrypt_cost == 10
        assert settings.email_check_deliverability is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults case-insensitively."""
        monkeypatch.setenv("BCRYPT_COST", "12")
        monkeypatch.setenv("email_check_deliverability", "true")

        settings = Settings(_env_file=None)

        assert settings.bcrypt_cost == 12
        assert settings.email_check_deliverability is True
