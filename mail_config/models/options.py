"""Functional options for building SMTP configuration.

Each ``with_*`` factory returns an option: a callable that sets exactly one
field on an ``SMTPConfig``. Options are applied in order, so the last option
for a field wins.

Usage:
    from mail_config.models import new_config, with_host, with_username

    config = new_config(
        with_host("mail.example.com"),
        with_username("user"),
        with_password("secret"),
    )
    config.validate()

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

from mail_config.core.logger import get_logger
from mail_config.models.smtp_config import SMTPConfig

logger = get_logger(__name__)

Option = Callable[[SMTPConfig], None]


def apply_options(config: SMTPConfig, *options: Option) -> SMTPConfig:
    """Apply options to an existing config in the order given.

    Args:
        config: Config to modify in place.
        *options: Options to apply.

    Returns:
        The same config instance.
    """
    for option in options:
        option(config)
    return config


def new_config(*options: Option) -> SMTPConfig:
    """Build an SMTP config from defaults and options.

    Never fails on missing credentials; call ``validate()`` on the result
    (or use ``new_validated_config``) to check them.

    Args:
        *options: Options overriding the defaults, applied in order.

    Returns:
        New SMTPConfig instance.
    """
    config = apply_options(SMTPConfig(), *options)
    logger.debug(f"SMTP config built with {len(options)} option(s): {config!r}")
    return config


def new_validated_config(*options: Option) -> SMTPConfig:
    """Build an SMTP config and validate its credentials.

    Args:
        *options: Options overriding the defaults, applied in order.

    Returns:
        New, validated SMTPConfig instance.

    Raises:
        MissingCredentialError: If username or password is empty.
    """
    config = new_config(*options)
    config.validate()
    return config


def with_host(host: str) -> Option:
    """Set the SMTP server hostname."""

    def option(config: SMTPConfig) -> None:
        config.host = host

    return option


def with_port(port: int) -> Option:
    """Set the SMTP server port."""

    def option(config: SMTPConfig) -> None:
        config.port = port

    return option


def with_username(username: str) -> Option:
    """Set the SMTP authentication username."""

    def option(config: SMTPConfig) -> None:
        config.username = username

    return option


def with_password(password: str) -> Option:
    """Set the SMTP authentication password."""

    def option(config: SMTPConfig) -> None:
        config.password = password

    return option


def with_from(from_email: str) -> Option:
    """Set the sender email address."""

    def option(config: SMTPConfig) -> None:
        config.from_email = from_email

    return option


def with_from_name(from_name: str) -> Option:
    """Set the sender display name."""

    def option(config: SMTPConfig) -> None:
        config.from_name = from_name

    return option


def with_insecure_skip_verify(insecure_skip_verify: bool) -> Option:
    """Set whether TLS certificate verification is skipped."""

    def option(config: SMTPConfig) -> None:
        config.insecure_skip_verify = insecure_skip_verify

    return option


def with_timeout(timeout: timedelta) -> Option:
    """Set the network timeout."""

    def option(config: SMTPConfig) -> None:
        config.timeout = timeout

    return option


def with_keep_alive(keep_alive: bool) -> Option:
    """Set whether the connection is kept open between sends."""

    def option(config: SMTPConfig) -> None:
        config.keep_alive = keep_alive

    return option


def with_auth_method(auth_method: str) -> Option:
    """Set the SMTP AUTH mechanism."""

    def option(config: SMTPConfig) -> None:
        config.auth_method = auth_method

    return option
