#!/usr/bin/env python3
"""Validate SMTP configuration loaded from the environment.

Loads SMTP_* variables (and an optional .env file), builds the SMTP config,
prints it with credentials masked and checks the credentials.

Usage:
    python -m mail_config.scripts.validate_config
    python -m mail_config.scripts.validate_config --verbose
    python -m mail_config.scripts.validate_config --env-file ./prod.env
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from mail_config.config import MailSettings
from mail_config.core.logger import get_logger, log_context, setup_logging
from mail_config.models.smtp_config import SMTPConfig

logger = get_logger(__name__)


def print_header() -> None:
    """Print script header."""
    print("\n" + "=" * 80)
    print("  📧 SMTP Configuration Validator")
    print("=" * 80)


def print_footer() -> None:
    """Print script footer."""
    print("=" * 80 + "\n")


def load_settings(env_file: str | None = None) -> MailSettings:
    """Load settings from the environment and an optional .env file.

    Args:
        env_file: Path of the .env file to read instead of ./.env.

    Returns:
        Loaded MailSettings.

    Raises:
        ValidationError: If an environment value has the wrong type.
    """
    if env_file:
        return MailSettings(_env_file=env_file)
    return MailSettings()


def check_config(config: SMTPConfig) -> bool:
    """Check the credentials of a built config.

    Args:
        config: SMTP config to check.

    Returns:
        True if the config is valid, False otherwise.
    """
    error = config.validation_error()
    if error is None:
        logger.info(log_context("validate", host=config.host, port=config.port))
        print("\n✅ SMTP configuration is valid")
        return True

    logger.warning(f"SMTP configuration invalid: {error}")
    print(f"\n❌ SMTP configuration is invalid: {error}")
    print(f"   → Set SMTP_{'USER' if error.field == 'username' else 'PASSWORD'} in the environment or .env file")
    return False


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        0 if the configuration is valid, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        description="Validate SMTP configuration loaded from the environment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quick validation
  python -m mail_config.scripts.validate_config

  # Read a specific .env file
  python -m mail_config.scripts.validate_config --env-file ./prod.env

  # Verbose output with debug info
  python -m mail_config.scripts.validate_config --verbose
        """,
    )

    parser.add_argument(
        "--env-file",
        "-e",
        type=str,
        metavar="PATH",
        help="Read settings from this .env file instead of ./.env",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Suppress header and footer output",
    )

    args = parser.parse_args(argv)

    if not args.no_header:
        print_header()

    try:
        settings = load_settings(args.env_file)
    except ValidationError as e:
        print(f"\n❌ Invalid environment settings:\n{e}")
        if not args.no_header:
            print_footer()
        return 1

    setup_logging(
        log_dir=settings.LOG_DIR,
        log_level="DEBUG" if args.verbose else settings.LOG_LEVEL,
        console_level="DEBUG" if args.verbose else "WARNING",
        enable_file=settings.LOG_TO_FILE,
        settings=settings,
    )

    valid = check_config(settings.build_smtp_config())

    if not args.no_header:
        print_footer()

    return 0 if valid else 1


if __name__ == "__main__":
    sys.exit(main())
