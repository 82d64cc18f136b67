# File: user_registry/services/user_service.py

"""
User persistence.

Owns connection checkout plus the two statements the API needs:
  - look a user up by email
  - insert a new (name, email) row

Every SQLAlchemy failure leaves this module as ConnectionFailure or
QueryFailure.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from user_registry.core.errors import ConnectionFailure, QueryFailure
from user_registry.models.user import users
from user_registry.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, engine_factory: Callable[[], Engine]):
        self._engine_factory = engine_factory

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """
        Check out one connection and run the block in a single transaction.

        The transaction commits when the block exits normally.
        """
        try:
            connection = self._engine_factory().connect()
        except SQLAlchemyError as exc:
            raise ConnectionFailure(str(exc)) from exc

        logger.debug("Database connection established")
        try:
            with connection.begin():
                yield connection
        except SQLAlchemyError as exc:
            raise QueryFailure(str(exc)) from exc
        finally:
            connection.close()

    def find_by_email(self, connection: Connection, email: str) -> Optional[UserRecord]:
        stmt = select(users.c.name, users.c.email).where(users.c.email == email)
        try:
            row = connection.execute(stmt).first()
        except SQLAlchemyError as exc:
            raise QueryFailure(str(exc)) from exc

        if row is None:
            return None
        return UserRecord(name=row.name, email=row.email)

    def create(self, connection: Connection, *, name: str, email: str) -> UserRecord:
        # Not atomic with find_by_email: concurrent registrations of one email can both land.
        try:
            connection.execute(insert(users).values(name=name, email=email))
        except SQLAlchemyError as exc:
            raise QueryFailure(str(exc)) from exc
        return UserRecord(name=name, email=email)

    def ping(self) -> bool:
        """Return True when a SELECT 1 round trip succeeds."""
        try:
            with self.connect() as connection:
                connection.exec_driver_sql("SELECT 1")
        except (ConnectionFailure, QueryFailure) as exc:
            logger.warning("Database ping failed: %s", exc)
            return False
        return True
