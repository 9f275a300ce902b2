# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from estate_http_api.config import AppEnv, Settings
from estate_http_api.crypto import generate_key_pair
from estate_http_api.db.models import Base
from estate_http_api.db.session import get_session
from estate_http_api.main import create_app


@pytest.fixture(scope="function")
def engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps the single connection alive so every session (and the
    TestClient's worker thread) sees the same database.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture(scope="function")
def settings():
    return Settings(APP_ENV=AppEnv.TESTING, LOG_FORMAT="console", API_PREFIX="/api")


@pytest.fixture(scope="function")
def client(session_factory, settings):
    """
    TestClient wired to the in-memory database.

    The lifespan is not entered, so nothing touches the configured
    DATABASE_URL.
    """
    app = create_app(settings)

    def _override_session():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_session] = _override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def key_pair():
    return generate_key_pair()


@pytest.fixture(scope="session")
def other_key_pair():
    return generate_key_pair()


class _UnavailableSession:
    """Session stand-in whose every query fails as if the database were down."""

    def __init__(self) -> None:
        self.rollbacks = 0

    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))

    def get(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))

    def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture(scope="function")
def unavailable_session():
    return _UnavailableSession()
