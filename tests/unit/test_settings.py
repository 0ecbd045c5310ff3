"""Unit tests for mail settings.

Tests loading SMTP settings from the environment and .env files and
converting them into SMTP configs.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from mail_config.config.settings import MailSettings
from mail_config.core.exceptions import MissingCredentialError
from mail_config.models.options import new_config, with_host
from mail_config.models.smtp_config import SMTPConfig


class TestMailSettingsLoad:
    """Tests for MailSettings loading."""

    def test_defaults_match_smtp_config(self):
        """Test an empty environment builds the default config."""
        settings = MailSettings()

        assert settings.build_smtp_config() == new_config()
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_TO_FILE is False

    def test_loads_from_environment(self, smtp_env):
        """Test SMTP settings are read from environment variables."""
        settings = MailSettings()

        assert settings.SMTP_HOST == "smtp.test.com"
        assert settings.SMTP_PORT == 2525
        assert settings.SMTP_USER == "test@test.com"
        assert settings.SMTP_PASSWORD == "testpassword"
        assert settings.SMTP_FROM_EMAIL == "noreply@test.com"
        assert settings.SMTP_FROM_NAME == "Test Service"

    def test_loads_from_env_file(self, tmp_path):
        """Test settings are read from .env in the working directory."""
        (tmp_path / ".env").write_text(
            "SMTP_USER=file-user\nSMTP_PASSWORD=file-pass\nSMTP_KEEP_ALIVE=true\n",
            encoding="utf-8",
        )

        settings = MailSettings()

        assert settings.SMTP_USER == "file-user"
        assert settings.SMTP_PASSWORD == "file-pass"
        assert settings.SMTP_KEEP_ALIVE is True

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch):
        """Test environment variables take precedence over .env values."""
        (tmp_path / ".env").write_text("SMTP_HOST=from-file\n", encoding="utf-8")
        monkeypatch.setenv("SMTP_HOST", "from-env")

        assert MailSettings().SMTP_HOST == "from-env"

    def test_password_spaces_removed(self, monkeypatch):
        """Test Gmail app password spaces are stripped."""
        monkeypatch.setenv("SMTP_PASSWORD", "wrce fmkh xlvn jiht")

        assert MailSettings().SMTP_PASSWORD == "wrcefmkhxlvnjiht"

    def test_host_stripped(self, monkeypatch):
        """Test surrounding whitespace is removed from the host."""
        monkeypatch.setenv("SMTP_HOST", "  mail.example.com  ")

        assert MailSettings().SMTP_HOST == "mail.example.com"

    def test_invalid_port(self, monkeypatch):
        """Test a non-numeric port is rejected."""
        monkeypatch.setenv("SMTP_PORT", "not-a-port")

        with pytest.raises(ValidationError):
            MailSettings()

    @pytest.mark.parametrize("timeout", ["inf", "-inf", "nan", "1e20", "-1e20"])
    def test_out_of_range_timeout(self, monkeypatch, timeout):
        """Test timeouts that cannot become a timedelta are rejected on load."""
        monkeypatch.setenv("SMTP_TIMEOUT", timeout)

        with pytest.raises(ValidationError):
            MailSettings()

    def test_invalid_log_level(self, monkeypatch):
        """Test unknown log levels are rejected."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            MailSettings()


class TestBuildSMTPConfig:
    """Tests for MailSettings.to_options() and build_smtp_config()."""

    def test_to_options_covers_every_field(self):
        """Test one option is produced per SMTPConfig field."""
        assert len(MailSettings().to_options()) == len(SMTPConfig.model_fields)

    def test_build_from_environment(self, smtp_env, monkeypatch):
        """Test every environment value reaches the config."""
        monkeypatch.setenv("SMTP_INSECURE_SKIP_VERIFY", "true")
        monkeypatch.setenv("SMTP_TIMEOUT", "12.5")
        monkeypatch.setenv("SMTP_KEEP_ALIVE", "1")
        monkeypatch.setenv("SMTP_AUTH_METHOD", "LOGIN")

        config = MailSettings().build_smtp_config()

        assert config == SMTPConfig(
            host="smtp.test.com",
            port=2525,
            username="test@test.com",
            password="testpassword",
            from_email="noreply@test.com",
            from_name="Test Service",
            insecure_skip_verify=True,
            timeout=timedelta(seconds=12.5),
            keep_alive=True,
            auth_method="LOGIN",
        )
        assert config.validate() is None

    def test_extra_options_applied_last(self, smtp_env):
        """Test extra options override environment values."""
        config = MailSettings().build_smtp_config(with_host("override.example.com"))

        assert config.host == "override.example.com"
        assert config.port == 2525

    def test_build_does_not_validate(self):
        """Test missing credentials only fail at validation time."""
        config = MailSettings().build_smtp_config()

        with pytest.raises(MissingCredentialError, match="username is empty"):
            config.validate()
