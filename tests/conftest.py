# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from user_registry.api.deps import get_user_service
from user_registry.db.init_db import init_db
from user_registry.main import app
from user_registry.services.user_service import UserService


@pytest.fixture
def engine():
    # One shared in-memory database for the whole test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def service(engine):
    return UserService(lambda: engine)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_user_service] = lambda: service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
