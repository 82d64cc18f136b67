# File: tests/test_user_service.py

import pytest
from sqlalchemy import create_engine, func, select

from user_registry.core.errors import ConnectionFailure, QueryFailure
from user_registry.models.user import users
from user_registry.services.user_service import UserService


def test_find_missing_user_returns_none(service):
    with service.connect() as conn:
        assert service.find_by_email(conn, "nobody@x.com") is None


def test_create_commits_on_exit(service):
    with service.connect() as conn:
        service.create(conn, name="Alice", email="a@x.com")

    with service.connect() as conn:
        user = service.find_by_email(conn, "a@x.com")
    assert user is not None
    assert user.name == "Alice"


def test_failed_block_rolls_back(service):
    with pytest.raises(RuntimeError):
        with service.connect() as conn:
            service.create(conn, name="Alice", email="a@x.com")
            raise RuntimeError("boom")

    with service.connect() as conn:
        assert service.find_by_email(conn, "a@x.com") is None


def test_check_then_insert_is_not_unique(engine):
    # Known limitation: nothing in storage stops a second row for one email.
    service = UserService(lambda: engine)
    with service.connect() as conn:
        service.create(conn, name="Alice", email="a@x.com")
        service.create(conn, name="Alicia", email="a@x.com")

    with engine.connect() as conn:
        count = conn.execute(select(func.count()).select_from(users)).scalar_one()
    assert count == 2


def test_unreachable_database_raises_connection_failure(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    service = UserService(lambda: engine)
    with pytest.raises(ConnectionFailure):
        with service.connect():
            pass
    assert service.ping() is False


def test_missing_table_raises_query_failure(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'bare.db'}")
    service = UserService(lambda: engine)
    with pytest.raises(QueryFailure):
        with service.connect() as conn:
            service.find_by_email(conn, "a@x.com")
    engine.dispose()


def test_engine_factory_errors_propagate():
    def factory():
        raise ConnectionFailure("DATABASE_URL must be set")

    service = UserService(factory)
    with pytest.raises(ConnectionFailure, match="DATABASE_URL"):
        with service.connect():
            pass
