"""Pytest configuration and fixtures for mail config tests.

Provides environment isolation and reusable SMTP configuration fixtures.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Generator

import pytest

from mail_config.config.settings import MailSettings
from mail_config.models.options import (
    Option,
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
from mail_config.models.smtp_config import SMTPConfig


# =============================================================================
# Environment Fixtures
# =============================================================================
@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove mail settings from the environment and hide any local .env."""
    for name in MailSettings.model_fields:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Close handlers installed by setup_logging() and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler in handlers or type(handler).__module__.startswith("_pytest"):
            continue
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


# =============================================================================
# SMTP Config Fixtures
# =============================================================================
@pytest.fixture
def full_options() -> list[Option]:
    """Options overriding every SMTPConfig field."""
    return [
        with_host("mail.example.com"),
        with_port(465),
        with_username("user"),
        with_password("pass"),
        with_from("sender@example.com"),
        with_from_name("Sender Name"),
        with_insecure_skip_verify(True),
        with_timeout(timedelta(seconds=15)),
        with_keep_alive(True),
        with_auth_method("CRAM-MD5"),
    ]


@pytest.fixture
def valid_config() -> SMTPConfig:
    """Create an SMTPConfig with credentials set."""
    return SMTPConfig(username="user", password="password")


@pytest.fixture
def smtp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Populate the environment with a complete SMTP configuration."""
    monkeypatch.setenv("SMTP_HOST", "smtp.test.com")
    monkeypatch.setenv("SMTP_PORT", "2525")
    monkeypatch.setenv("SMTP_USER", "test@test.com")
    monkeypatch.setenv("SMTP_PASSWORD", "testpassword")
    monkeypatch.setenv("SMTP_FROM_EMAIL", "noreply@test.com")
    monkeypatch.setenv("SMTP_FROM_NAME", "Test Service")
