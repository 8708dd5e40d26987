# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from core.config import Settings
from .utils import BASE_URL, register

@pytest.fixture
def settings(test_db_url):
    return Settings(
        database_url=test_db_url,
        jwt_secret="test-secret",
        environment="test",
        enable_seed=True,
        bcrypt_rounds=4,
        allowed_origins=["http://localhost:5173"],
        google_books_url="https://books.example/volumes",
    )

@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)

@pytest.fixture
def client(app):
    with TestClient(app, base_url=BASE_URL) as test_client:
        yield test_client

@pytest.fixture
def make_client(app, client):
    """Build further clients with their own cookie jars, one per simulated browser."""
    def _make():
        return TestClient(app, base_url=BASE_URL)
    return _make

@pytest.fixture
def auth_client(client):
    """A client with a registered, logged-in user."""
    response = register(client)
    assert response.status_code == 201
    return client
