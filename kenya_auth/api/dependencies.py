"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from kenya_auth.config import get_settings
from kenya_auth.database import get_db
from kenya_auth.services.credentials import CredentialService
from kenya_auth.services.tokens import TokenService
from kenya_auth.services.user_store import UserStore

# Missing credentials are reported by the credential service, not HTTPBearer
security = HTTPBearer(auto_error=False)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Get a user store bound to the request's session."""
    return UserStore(db)


def get_token_service() -> TokenService:
    """Get a token service configured from settings."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )


def get_credential_service(
    store: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> CredentialService:
    """Get credential service with dependencies."""
    return CredentialService(
        store,
        tokens,
        uniform_login_errors=get_settings().login_uniform_errors,
    )


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Extract the raw token from an ``Authorization: Bearer`` header."""
    if credentials is None:
        return None
    return credentials.credentials
