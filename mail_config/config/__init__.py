"""Configuration module for mail configuration.

Loads SMTP and logging settings from environment variables or .env file.

Created: 2026-10-19
Version: 1.0.0
"""

from mail_config.config.settings import MailSettings

__all__ = ["MailSettings"]
