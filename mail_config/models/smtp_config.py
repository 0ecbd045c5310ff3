"""SMTP configuration model.

Defines the Pydantic model holding every setting an SMTP client needs,
together with the default values and the credential check.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, Field

from mail_config.core.exceptions import MissingCredentialError

DEFAULT_HOST = "smtp.gmail.com"
DEFAULT_PORT = 587
DEFAULT_TIMEOUT = timedelta(seconds=30)
DEFAULT_AUTH_METHOD = "PLAIN"


class SMTPConfig(BaseModel):
    """SMTP client configuration model.

    Stores SMTP connection parameters. Only the credentials are checked,
    and only when ``validate()`` is called; every other field is stored
    as given.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port.
        username: SMTP authentication username.
        password: SMTP authentication password (hidden from repr).
        from_email: Sender email address.
        from_name: Sender display name.
        insecure_skip_verify: Skip TLS certificate verification.
        timeout: Network timeout for the downstream client.
        keep_alive: Keep the SMTP connection open between sends.
        auth_method: SMTP AUTH mechanism name (e.g. PLAIN, LOGIN, CRAM-MD5).
    """

    host: str = Field(default=DEFAULT_HOST, description="SMTP server hostname")
    port: int = Field(default=DEFAULT_PORT, description="SMTP server port")
    username: str = Field(default="", description="SMTP authentication username")
    password: str = Field(
        default="", repr=False, description="SMTP authentication password"
    )
    from_email: str = Field(default="", description="Sender email address")
    from_name: str = Field(default="", description="Sender display name")
    insecure_skip_verify: bool = Field(
        default=False, description="Skip TLS certificate verification"
    )
    timeout: timedelta = Field(
        default=DEFAULT_TIMEOUT, description="Network timeout for the SMTP client"
    )
    keep_alive: bool = Field(
        default=False, description="Keep the connection open between sends"
    )
    auth_method: str = Field(
        default=DEFAULT_AUTH_METHOD, description="SMTP AUTH mechanism"
    )

    def validation_error(self) -> MissingCredentialError | None:
        """Return the credential error for this config, if any.

        Username is checked before password, so a config with both empty
        reports the username.

        Returns:
            MissingCredentialError for the first empty credential, or None.
        """
        if self.username == "":
            return MissingCredentialError("username")
        if self.password == "":
            return MissingCredentialError("password")
        return None

    def validate(self) -> None:  # type: ignore[override]
        """Validate that SMTP credentials are set.

        Can be called any number of times, including after fields were
        assigned directly.

        Raises:
            MissingCredentialError: If username or password is empty.
        """
        error = self.validation_error()
        if error is not None:
            raise error
