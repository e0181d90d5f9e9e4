import os

# Settings are read at import time, so the test environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blogapi.core.config import settings
from blogapi.core.security import verify_access_token
from blogapi.db.base import Base
from blogapi.db.session import get_db
from blogapi.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

API = settings.API_V1_STR


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class Account:
    def __init__(self, email: str, token: str):
        self.email = email
        self.token = token
        self.id = verify_access_token(token)

    @property
    def headers(self):
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def make_account(client):
    """Sign up through the API and return the account with its token"""
    def _make(email: str = "alice@mail.com", password: str = "s3cret-pass", name: str = "Alice") -> Account:
        response = client.post(
            f"{API}/user/signup",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 200, response.text
        return Account(email, response.json()["jwt"])
    return _make


@pytest.fixture
def alice(make_account):
    return make_account("alice@mail.com", name="Alice")


@pytest.fixture
def bob(make_account):
    return make_account("bob@mail.com", name="Bob")


@pytest.fixture
def alice_post(client, alice):
    response = client.post(
        f"{API}/blog",
        json={"title": "First", "content": "Hello world"},
        headers=alice.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
