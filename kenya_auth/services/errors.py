"""Typed failures raised by the credential service.

Each error carries the HTTP status it maps to at the request boundary.
"""


class CredentialError(Exception):
    """Base class for credential service failures."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        """Extra response headers for this error."""
        return None


class ValidationError(CredentialError):
    """Required input is missing or empty."""

    status_code = 400
    default_message = "All fields are required"


class DuplicateEmailError(CredentialError):
    """Email is already registered."""

    status_code = 400
    default_message = "Email already exists"


class UserNotFoundError(CredentialError):
    """No user matches the email or token subject."""

    status_code = 400
    default_message = "User not found"


class InvalidCredentialsError(CredentialError):
    """Password does not match the stored hash."""

    status_code = 400
    default_message = "Invalid password"


class _BearerError(CredentialError):
    status_code = 401

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class MissingTokenError(_BearerError):
    """No bearer token was presented."""

    default_message = "Access token required"


class InvalidTokenError(_BearerError):
    """Bearer token is malformed, expired, or has a bad signature."""

    default_message = "Invalid token"


class StoreError(CredentialError):
    """The user store failed or is unreachable."""

    status_code = 500
    default_message = "Server error"
