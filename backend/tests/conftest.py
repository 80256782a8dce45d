"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database and a Settings object
with a low bcrypt work factor so hashing stays fast.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.core.config import Settings, get_settings
from blog_api.core.database import Base, get_db
from blog_api.core.security import build_password_context
from blog_api.main import app
from blog_api.repositories.credential_store import CredentialStore
from blog_api.services.authenticator import Authenticator

STRONG_PASSWORD = "Passw0rd!"


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        SECRET_KEY="test-secret-key-that-is-at-least-32-characters-long",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def engine():
    # StaticPool keeps one connection so the in-memory database survives
    # across sessions and the TestClient's worker thread
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def password_context(test_settings):
    return build_password_context(test_settings.BCRYPT_ROUNDS)


@pytest.fixture
def store(db_session):
    return CredentialStore(db_session)


@pytest.fixture
def authenticator(store, password_context, test_settings):
    return Authenticator(store, password_context, test_settings)


@pytest.fixture
def client(session_factory, test_settings):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    # Not used as a context manager, so the lifespan hook (create_all on
    # the real engine) does not run
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client):
    """Register a user through the API and return its auth headers"""
    def _register_and_login(username: str, password: str = STRONG_PASSWORD) -> dict:
        response = client.post("/auth/register", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _register_and_login
