"""Mail Config - SMTP client configuration built from functional options.

Provides the settings record an SMTP mail-sending client consumes:
- Documented defaults (smtp.gmail.com:587, 30s timeout, PLAIN auth)
- One composable option per setting, applied in order
- Credential validation, separate from construction
- Environment/.env loading via pydantic-settings

Modules:
    - core: Exceptions, logger
    - config: Pydantic v2 settings loaded from the environment
    - models: SMTPConfig model and functional options
    - scripts: Command-line configuration validator

Usage:
    from mail_config import new_config, with_password, with_username

    config = new_config(
        with_username("sender@gmail.com"),
        with_password("app-password"),
    )
    config.validate()

Created: 2026-10-19
Version: 1.0.0
"""

__version__ = "1.0.0"

# Core utilities
from mail_config.core import (
    MailConfigError,
    MissingCredentialError,
    get_logger,
    setup_logging,
)

# Models
from mail_config.models import (
    DEFAULT_AUTH_METHOD,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    Option,
    SMTPConfig,
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

# Configuration
from mail_config.config import MailSettings

__all__ = [
    # Version
    "__version__",
    # Core
    "MailConfigError",
    "MissingCredentialError",
    "get_logger",
    "setup_logging",
    # Configuration
    "MailSettings",
    # Models
    "SMTPConfig",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_AUTH_METHOD",
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
