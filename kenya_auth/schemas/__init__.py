"""Pydantic schemas for API requests and responses."""

from kenya_auth.schemas.auth import (
    AuthResponse,
    ProfileResponse,
    ProfileUser,
    UserLogin,
    UserRegister,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "ProfileUser",
    "AuthResponse",
    "ProfileResponse",
]
