"""Centralized logging configuration for mail configuration.

Provides a logger factory with file rotation, console output, and a
masked configuration summary for startup diagnostics.

Features:
    - Dual output: Console (stdout) + File handlers
    - Automatic log file rotation (10MB, 5 backups)
    - Separate error log file
    - Module loggers inherit the root level
    - Credential masking for printed summaries

Created: 2026-10-19
Version: 1.0.0
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mail_config.config.settings import MailSettings

# Global configuration
_LOG_DIR = Path("./logs")
_LOG_FORMAT_DETAILED = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)
_LOG_FORMAT_SIMPLE = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ============================================================================
# ANSI Color Codes
# ============================================================================
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "magenta": "\033[35m",
    "red": "\033[31m",
}


def mask_secret(value: str) -> str:
    """Mask a secret for display, showing only first and last char.

    Args:
        value: Secret to mask.

    Returns:
        Masked string.
    """
    if not value:
        return "(not set)"
    if len(value) <= 2:
        return "***"
    return f"{value[0]}{'*' * (len(value) - 2)}{value[-1]}"


def print_config_summary(settings: "MailSettings") -> None:
    """Print a formatted SMTP and logging configuration summary.

    Args:
        settings: MailSettings instance with loaded configuration.
    """
    c = COLORS

    def _line(label: str, value: str, color: str = "cyan") -> None:
        print(f"  {c['dim']}│{c['reset']} {label:<26} {c[color]}{value}{c['reset']}")

    def _header(icon: str, title: str, color: str) -> None:
        print(f"\n  {c[color]}{icon} {title}{c['reset']}")
        print(f"  {c['dim']}├{'─' * 50}{c['reset']}")

    _header("▶", "SMTP Configuration", "magenta")
    _line("Host", settings.SMTP_HOST)
    _line("Port", str(settings.SMTP_PORT))
    _line("User", settings.SMTP_USER or "(not set)", "yellow" if not settings.SMTP_USER else "cyan")
    _line("Password", mask_secret(settings.SMTP_PASSWORD), "yellow" if not settings.SMTP_PASSWORD else "cyan")
    _line("From Email", settings.SMTP_FROM_EMAIL or "(not set)")
    _line("From Name", settings.SMTP_FROM_NAME or "(not set)")
    _line("Auth Method", settings.SMTP_AUTH_METHOD)
    _line(
        "Verify TLS",
        str(not settings.SMTP_INSECURE_SKIP_VERIFY).lower(),
        "yellow" if settings.SMTP_INSECURE_SKIP_VERIFY else "green",
    )
    _line("Keep Alive", str(settings.SMTP_KEEP_ALIVE).lower())
    _line("Timeout", f"{settings.SMTP_TIMEOUT:g}s")

    _header("▶", "Logging Configuration", "yellow")
    _line("Level", settings.LOG_LEVEL, "green")
    _line("Log to File", str(settings.LOG_TO_FILE).lower())
    _line("Directory", settings.LOG_DIR)

    print(f"\n{c['dim']}{'─' * 72}{c['reset']}\n")


def setup_logging(
    log_dir: Path | None = None,
    log_level: str = "INFO",
    file_level: str = "DEBUG",
    console_level: str = "INFO",
    enable_file: bool = True,
    settings: Optional["MailSettings"] = None,
) -> None:
    """Configure root logger with file and console handlers.

    Should be called once at application startup.

    Args:
        log_dir: Directory for log files. Defaults to ./logs.
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_level: File handler level (usually DEBUG for comprehensive logging).
        console_level: Console handler level (usually INFO to reduce noise).
        enable_file: Whether to write logs to files.
        settings: Optional MailSettings for printing configuration summary.

    Example:
        setup_logging(
            log_level="INFO",
            console_level="WARNING",
            enable_file=False,
        )
    """
    global _LOG_DIR

    _LOG_DIR = Path(log_dir) if log_dir else Path("./logs")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT_SIMPLE, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if enable_file:
        _LOG_DIR.mkdir(parents=True, exist_ok=True)

        # RotatingFileHandler: 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mail_config.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        file_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mail_config.error.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(error_handler)

    if settings:
        print_config_summary(settings)


def get_logger(name: str, log_level: str | None = None) -> logging.Logger:
    """Get a configured logger instance for a module.

    Call setup_logging() once at startup for full configuration.

    Args:
        name: Logger name (typically __name__ of calling module).
        log_level: Optional override for logger level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Logger instance.

    Example:
        from mail_config.core.logger import get_logger

        logger = get_logger(__name__)
        logger.debug("SMTP config built")
    """
    logger = logging.getLogger(name)

    if log_level:
        logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


def get_logs_directory() -> Path:
    """Get the logs directory path.

    Returns:
        Path of the directory used by the last setup_logging() call.
    """
    return _LOG_DIR


def log_context(operation: str, **kwargs) -> str:
    """Format a log context string with metadata.

    Args:
        operation: Operation name (e.g., "validate", "load_settings").
        **kwargs: Additional context key-value pairs.

    Returns:
        Formatted context string for logging.

    Example:
        msg = log_context("validate", host="smtp.gmail.com", port=587)
        # validate (host=smtp.gmail.com, port=587)
    """
    if not kwargs:
        return operation
    extra = ", ".join(f"{k}={v}" for k, v in kwargs.items())
    return f"{operation} ({extra})"
