"""Password hashing with bcrypt."""

from passlib.context import CryptContext

from kenya_auth.services.errors import ValidationError

# Password hashing context, cost factor 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognized or corrupt hash, or a password bcrypt cannot take
        return False


def get_password_hash(password: str) -> str:
    """Hash a password.

    Raises ValidationError for passwords bcrypt refuses, such as ones
    containing NUL bytes.
    """
    try:
        return pwd_context.hash(password)
    except ValueError as e:
        raise ValidationError("Password contains invalid characters") from e
