from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from user_registry.core.config import settings
from user_registry.core.errors import ConnectionFailure


@lru_cache
def get_engine() -> Engine:
    """
    Build the process-wide engine on first use.

    Connections are pooled; each request checks one out and returns it.
    """
    database_url = settings.database_url
    if not database_url:
        raise ConnectionFailure("DATABASE_URL must be set")

    try:
        return create_engine(
            database_url,
            pool_pre_ping=True,
            connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
        )
    except SQLAlchemyError as exc:
        raise ConnectionFailure(f"Invalid DATABASE_URL: {exc}") from exc
