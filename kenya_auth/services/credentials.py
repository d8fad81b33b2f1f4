"""Credential service: registration, login and token-based profile lookup."""

import logging
from dataclasses import dataclass

from kenya_auth.models.user import User
from kenya_auth.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    MissingTokenError,
    StoreError,
    UserNotFoundError,
    ValidationError,
)
from kenya_auth.services.passwords import get_password_hash, verify_password
from kenya_auth.services.tokens import TokenService
from kenya_auth.services.user_store import InsertStatus, UserStore

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """A user together with a freshly issued token."""

    user: User
    token: str


class CredentialService:
    """Service for registering and authenticating users."""

    def __init__(
        self,
        store: UserStore,
        tokens: TokenService,
        uniform_login_errors: bool = False,
    ):
        self.store = store
        self.tokens = tokens
        self.uniform_login_errors = uniform_login_errors

    def register(self, name: str | None, email: str | None, password: str | None) -> AuthResult:
        """Create a user and issue a token for it."""
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        result = self.store.insert_user(
            email=email,
            password_hash=get_password_hash(password),
            name=name,
        )

        if result.status is InsertStatus.CONFLICT:
            logger.info("Registration rejected: email already exists")
            raise DuplicateEmailError()
        if result.status is InsertStatus.FAILURE or result.user is None:
            raise StoreError()

        user = result.user
        logger.info(f"Registered user {user.id}")
        return AuthResult(user=user, token=self.tokens.issue(user.id))

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Authenticate by email and password and issue a token."""
        if not email or not password:
            raise ValidationError("Email and password required")

        user = self.store.get_by_email(email)

        if user is None:
            logger.warning("Login failed: unknown email")
            if self.uniform_login_errors:
                raise InvalidCredentialsError("Invalid email or password")
            raise UserNotFoundError()

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            if self.uniform_login_errors:
                raise InvalidCredentialsError("Invalid email or password")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return AuthResult(user=user, token=self.tokens.issue(user.id))

    def get_profile(self, token: str | None) -> User:
        """Resolve a bearer token to its user."""
        if not token:
            raise MissingTokenError()

        user_id = self.tokens.verify(token)
        user = self.store.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(status_code=404)
        return user
