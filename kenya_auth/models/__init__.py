"""SQLAlchemy models."""

from kenya_auth.models.user import User

__all__ = [
    "User",
]
