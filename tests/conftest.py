import secrets

import pytest
from fastapi.testclient import TestClient

from postboard.core.config import Settings
from postboard.core.security import PasswordHasher, SessionSigner
from postboard.db.store import JsonStore
from postboard.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / 'data',
        secret_key=secrets.token_hex(32),
        password_hash_rounds=1,
    )


@pytest.fixture
def store(settings) -> JsonStore:
    db = JsonStore(settings.data_dir)
    db.initialize()
    return db


@pytest.fixture
def hasher(settings) -> PasswordHasher:
    return PasswordHasher.from_settings(settings)


@pytest.fixture
def signer(settings) -> SessionSigner:
    return SessionSigner.from_settings(settings)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def login_as(client):
    """Register a user with the given role and return its bearer headers."""

    def _login_as(username: str, role: str = 'user', password: str = 'correct horse') -> dict[str, str]:
        response = client.post('/register', json={'username': username, 'password': password, 'role': role})
        assert response.status_code == 201
        response = client.post('/login', json={'username': username, 'password': password})
        assert response.status_code == 200
        return {'Authorization': f"Bearer {response.json()['token']}"}

    return _login_as
