"""Models module for mail configuration.

Defines the SMTP configuration model, its defaults, and the functional
options used to build it.

Created: 2026-10-19
Version: 1.0.0
"""

from mail_config.models.options import (
    Option,
    apply_options,
    new_config,
    new_validated_config,
    with_auth_method,
    with_from,
    with_from_name,
    with_host,
    with_insecure_skip_verify,
    with_keep_alive,
    with_password,
    with_port,
    with_timeout,
    with_username,
)
from mail_config.models.smtp_config import (
    DEFAULT_AUTH_METHOD,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    SMTPConfig,
)

__all__ = [
    # Model
    "SMTPConfig",
    # Defaults
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_AUTH_METHOD",
    # Construction
    "Option",
    "apply_options",
    "new_config",
    "new_validated_config",
    # Options
    "with_host",
    "with_port",
    "with_username",
    "with_password",
    "with_from",
    "with_from_name",
    "with_insecure_skip_verify",
    "with_timeout",
    "with_keep_alive",
    "with_auth_method",
]
