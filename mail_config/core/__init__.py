"""Core module for mail configuration.

Provides exceptions and logging configuration.

Created: 2026-10-19
Version: 1.0.0
"""

from mail_config.core.exceptions import MailConfigError, MissingCredentialError
from mail_config.core.logger import (
    get_logger,
    get_logs_directory,
    log_context,
    mask_secret,
    setup_logging,
)

__all__ = [
    # Exceptions
    "MailConfigError",
    "MissingCredentialError",
    # Logging
    "get_logger",
    "setup_logging",
    "get_logs_directory",
    "log_context",
    "mask_secret",
]
