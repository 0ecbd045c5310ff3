"""Custom exceptions for mail configuration.

Defines the exception types raised while building and checking SMTP
settings so consumers can catch configuration problems precisely.

Created: 2026-10-19
Version: 1.0.0
"""


class MailConfigError(Exception):
    """Base exception for all mail configuration errors.

    Lets consumers catch every configuration problem raised by this package
    with a single except block.

    Example:
        try:
            config = new_validated_config(*options)
        except MailConfigError as e:
            logger.error(f"Mail configuration error: {e}")
    """

    pass


class MissingCredentialError(MailConfigError):
    """Exception raised when a required SMTP credential is empty.

    The message is exactly ``"<field> is empty"`` so callers can match on
    ``str(error)`` as well as on ``field``.

    Attributes:
        field (str): Name of the empty credential ("username" or "password").

    Example:
        raise MissingCredentialError("username")
    """

    def __init__(self, field: str):
        """Initialize missing credential error.

        Args:
            field: Name of the credential that is empty.
        """
        super().__init__(f"{field} is empty")
        self.field = field

    def __reduce__(self):
        """Rebuild from the field name so copies keep the original message."""
        return (type(self), (self.field,))
