"""Authentication schemas.

Request fields are optional at the schema level: presence is checked by the
credential service so that a missing field gets the same error body as an
empty one.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserRegister(BaseModel):
    """User registration request."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public user fields returned after register and login."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    email: str


class ProfileUser(UserResponse):
    """Public user fields returned by the profile endpoint."""

    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    success: bool = True
    message: str
    user: UserResponse
    token: str


class ProfileResponse(BaseModel):
    """Profile lookup response."""

    user: ProfileUser
