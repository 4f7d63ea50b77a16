# server/tests/conftest.py

import os

# Pin configuration before the application modules are imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.post_service import PostService
from core.security import BcryptPasswordHasher, JwtTokenIssuer
from core.user_service import UserService
from database import get_db
from main import app
from models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return JwtTokenIssuer(os.environ["JWT_SECRET_KEY"], expire_minutes=5)


@pytest.fixture
def user_service(db, hasher, token_issuer):
    return UserService(db, hasher, token_issuer)


@pytest.fixture
def post_service(db):
    return PostService(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register a user over HTTP and return bearer headers for it."""
    def _auth_headers(username: str, password: str = "password") -> dict:
        client.post("/api/v1/users/join", json={"username": username, "password": password})
        res = client.post("/api/v1/users/login", json={"username": username, "password": password})
        token = res.json()["data"]["access_token"]
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
