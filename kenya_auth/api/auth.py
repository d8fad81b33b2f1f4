"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from kenya_auth.api.dependencies import get_bearer_token, get_credential_service
from kenya_auth.schemas.auth import (
    AuthResponse,
    ProfileResponse,
    ProfileUser,
    UserLogin,
    UserRegister,
    UserResponse,
)
from kenya_auth.services.credentials import CredentialService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(
    user_data: UserRegister,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Register a new user."""
    result = service.register(user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(result.user),
        token=result.token,
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Login with email and password."""
    result = service.login(credentials.email, credentials.password)

    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(result.user),
        token=result.token,
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    token: Annotated[str | None, Depends(get_bearer_token)],
    service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Get the user identified by the bearer token."""
    user = service.get_profile(token)
    return ProfileResponse(user=ProfileUser.model_validate(user))
