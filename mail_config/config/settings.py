"""Mail configuration settings with Pydantic v2.

Loads SMTP and logging settings from environment variables or a .env file
and turns them into functional options for ``new_config``.

All settings can be overridden via environment variables.

Created: 2026-10-19
Version: 1.0.0
"""

from datetime import timedelta

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mail_config.core.logger import get_logger
from mail_config.models.options import (
    Option,
    new_config,
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

logger = get_logger(__name__)


class MailSettings(BaseSettings):
    """Mail configuration settings.

    Loads settings from environment variables and .env file using Pydantic v2.
    All settings are case-sensitive. Defaults match the SMTPConfig defaults,
    so an empty environment builds the same config as ``new_config()``.

    Attributes:
        SMTP_HOST: SMTP server hostname.
        SMTP_PORT: SMTP server port.
        SMTP_USER: SMTP authentication username.
        SMTP_PASSWORD: SMTP authentication password.
        SMTP_FROM_EMAIL: Sender email address.
        SMTP_FROM_NAME: Sender display name.
        SMTP_INSECURE_SKIP_VERIFY: Skip TLS certificate verification.
        SMTP_TIMEOUT: Network timeout in seconds.
        SMTP_KEEP_ALIVE: Keep the connection open between sends.
        SMTP_AUTH_METHOD: SMTP AUTH mechanism.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # SMTP Configuration
    # ========================================================================
    SMTP_HOST: str = Field(
        default=DEFAULT_HOST,
        description="SMTP server hostname",
    )
    SMTP_PORT: int = Field(
        default=DEFAULT_PORT,
        description="SMTP server port",
    )
    SMTP_USER: str = Field(
        default="",
        description="SMTP authentication username",
    )
    SMTP_PASSWORD: str = Field(
        default="",
        description="SMTP authentication password",
    )
    SMTP_FROM_EMAIL: str = Field(
        default="",
        description="Sender email address",
    )
    SMTP_FROM_NAME: str = Field(
        default="",
        description="Sender display name",
    )
    SMTP_INSECURE_SKIP_VERIFY: bool = Field(
        default=False,
        description="Skip TLS certificate verification",
    )
    SMTP_TIMEOUT: float = Field(
        default=DEFAULT_TIMEOUT.total_seconds(),
        gt=timedelta.min.total_seconds(),
        lt=timedelta.max.total_seconds(),
        allow_inf_nan=False,
        description="Network timeout in seconds",
    )
    SMTP_KEEP_ALIVE: bool = Field(
        default=False,
        description="Keep the connection open between sends",
    )
    SMTP_AUTH_METHOD: str = Field(
        default=DEFAULT_AUTH_METHOD,
        description="SMTP AUTH mechanism",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )

    @field_validator("SMTP_HOST")
    @classmethod
    def validate_smtp_host(cls, v: str) -> str:
        """Strip surrounding whitespace from the SMTP host.

        Args:
            v: SMTP hostname.

        Returns:
            Stripped hostname.
        """
        return v.strip()

    @field_validator("SMTP_PASSWORD")
    @classmethod
    def validate_smtp_password(cls, v: str) -> str:
        """Remove spaces from SMTP password.

        Gmail app passwords are displayed with spaces for readability but
        must be used without them.

        Args:
            v: Password value.

        Returns:
            Password with spaces removed.

        Examples:
            >>> # Gmail generates: "wrce fmkh xlvn jiht"
            >>> # Converted to: "wrcefmkhxlvnjiht"
        """
        return v.replace(" ", "")

    def to_options(self) -> list[Option]:
        """Convert settings into functional options.

        Returns:
            One option per SMTPConfig field, in field order.
        """
        return [
            with_host(self.SMTP_HOST),
            with_port(self.SMTP_PORT),
            with_username(self.SMTP_USER),
            with_password(self.SMTP_PASSWORD),
            with_from(self.SMTP_FROM_EMAIL),
            with_from_name(self.SMTP_FROM_NAME),
            with_insecure_skip_verify(self.SMTP_INSECURE_SKIP_VERIFY),
            with_timeout(timedelta(seconds=self.SMTP_TIMEOUT)),
            with_keep_alive(self.SMTP_KEEP_ALIVE),
            with_auth_method(self.SMTP_AUTH_METHOD),
        ]

    def build_smtp_config(self, *extra_options: Option) -> SMTPConfig:
        """Build an SMTPConfig from these settings.

        Credentials are not validated; call ``validate()`` on the result.

        Args:
            *extra_options: Options applied after the environment values.

        Returns:
            New SMTPConfig instance.
        """
        logger.debug(f"Building SMTP config for {self.SMTP_HOST}:{self.SMTP_PORT}")
        return new_config(*self.to_options(), *extra_options)
