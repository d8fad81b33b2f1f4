"""JWT issuing and verification."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from kenya_auth.services.errors import InvalidTokenError


class TokenService:
    """Stateless signer and verifier for bearer tokens.

    Tokens carry the user id as ``sub`` and expire after
    ``expiration_minutes``.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 10080):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = expiration_minutes

    def issue(self, user_id: int) -> str:
        """Create a signed token for a user."""
        now = datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(minutes=self.expiration_minutes),
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """Validate a token and return its user id."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError() from e

        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError() from e
