"""Database configuration and session management."""

from collections.abc import Generator
from functools import lru_cache
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from kenya_auth.config import get_settings
from kenya_auth.services.errors import StoreError

settings = get_settings()


def _engine_options(database_url: str) -> dict[str, Any]:
    """Build create_engine keyword arguments for the configured backend."""
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }
    if settings.database_sslmode:
        options["connect_args"] = {"sslmode": settings.database_sslmode}
    return options


@lru_cache
def get_engine() -> Engine:
    """Build the engine on first use, so a bad DATABASE_URL cannot stop the app importing."""
    return create_engine(settings.database_url, **_engine_options(settings.database_url))


SessionLocal = sessionmaker(autocommit=False, autoflush=False)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    try:
        engine = get_engine()
    except SQLAlchemyError as e:
        raise StoreError() from e

    db = SessionLocal(bind=engine)
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from kenya_auth import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
