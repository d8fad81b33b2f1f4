"""User model."""

from sqlalchemy import Column, DateTime, Integer, String, func

from kenya_auth.database import Base


class User(Base):
    """Registered user, keyed by a unique email."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    # Column keeps its deployed name; it only ever holds the bcrypt hash
    password_hash = Column("password", String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
