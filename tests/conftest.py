"""Pytest configuration and fixtures."""

import os
import tempfile

# Settings are read once at import time, so test overrides go in first
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="pony-uploads-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.api.dependencies import get_image_storage  # noqa: E402
from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.uploads import ImageStorage  # noqa: E402

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores the logged-in user's details."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from src import models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def image_storage(upload_dir):
    return ImageStorage(upload_dir, "http://testserver")


@pytest.fixture
def session_factory():
    """Session factory for tests that need their own sessions, e.g. one per thread."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def client(db, image_storage):
    """Create a test client with database and storage overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, email: str, name: str = "Test User") -> AuthHeaders:
    response = client.post(
        "/users/register",
        json={"name": name, "email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201

    response = client.post("/auth/login", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "test@example.com")


PONY_FIELDS = {
    "name": "Rainbow Dash",
    "element": "Loyalty",
    "personality": "Brave and loyal",
    "talent": "Flying at supersonic speeds",
    "summary": "Rainbow Dash is a brave pegasus pony who represents the element of loyalty.",
    "imageUrl": "http://testserver/uploads/rainbow-dash.png",
}


@pytest.fixture
def create_pony(client, auth_headers):
    """Factory creating a pony through the API."""

    def _create(**overrides):
        response = client.post("/ponies", headers=auth_headers, json={**PONY_FIELDS, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def pony_fields():
    return dict(PONY_FIELDS)


@pytest.fixture
def make_user(client):
    """Factory registering and logging in additional users."""

    def _make(email: str, name: str = "Test User") -> AuthHeaders:
        return register_and_login(client, email, name)

    return _make
