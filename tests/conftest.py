import pytest

from db import get_session, Role
from main import create_app
from services.auth_service import AuthService


@pytest.fixture
def app(tmp_path):
    """Application bound to a throwaway SQLite file."""
    app = create_app(f"sqlite:///{tmp_path / 'librec_test.sqlite'}")
    app.config.update(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def session(app):
    """A session on the test database, closed after the test."""
    s = get_session()
    yield s
    s.close()


@pytest.fixture
def accounts(app):
    """One admin and one staff account, both with password 'secret'."""
    s = get_session()
    try:
        AuthService.create_user(s, "admin", "secret", Role.ADMIN)
        AuthService.create_user(s, "fatihah", "secret", Role.STAFF)
        s.commit()
    finally:
        s.close()


def _login(client, username):
    response = client.post("/api/v1/auth/login",
                           json={"username": username, "password": "secret"})
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(client, accounts):
    """Test client signed in as the admin account."""
    return _login(client, "admin")


@pytest.fixture
def staff_client(client, accounts):
    """Test client signed in as a staff account."""
    return _login(client, "fatihah")
