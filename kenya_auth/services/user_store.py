"""User store backed by the ``users`` table."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from kenya_auth.models.user import User
from kenya_auth.services.errors import StoreError

logger = logging.getLogger(__name__)


class InsertStatus(str, Enum):
    """Outcome of inserting a user row."""

    OK = "ok"
    CONFLICT = "conflict"
    FAILURE = "failure"


@dataclass
class InsertResult:
    """Result of ``UserStore.insert_user``; ``user`` is set only when OK."""

    status: InsertStatus
    user: User | None = None


class UserStore:
    """Parameterized insert and select operations on users."""

    def __init__(self, db: Session):
        self.db = db

    def insert_user(self, email: str, password_hash: str, name: str | None = None) -> InsertResult:
        """Insert a user atomically.

        The unique email constraint is the only conflict the table can
        raise, so any integrity violation is reported as CONFLICT.
        """
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            self.db.rollback()
            return InsertResult(status=InsertStatus.CONFLICT)
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("Failed to insert user", exc_info=True)
            return InsertResult(status=InsertStatus.FAILURE)

        return InsertResult(status=InsertStatus.OK, user=user)

    def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self._fail("User lookup by email failed")
            raise StoreError() from e

    def get_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        try:
            return self.db.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError as e:
            self._fail(f"User lookup for id {user_id} failed")
            raise StoreError() from e

    def current_time(self) -> datetime:
        """Return the store's clock, used as a connectivity probe."""
        try:
            return self.db.execute(select(func.current_timestamp())).scalar_one()
        except SQLAlchemyError as e:
            self._fail("Database time query failed")
            raise StoreError("Database connection failed") from e

    def _fail(self, message: str) -> None:
        logger.error(message, exc_info=True)
        self.db.rollback()
