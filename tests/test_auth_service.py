import pytest

from db.models import Role, User
from services.auth_service import (
    AuthService, AuthError, LOGIN_FAILED_MESSAGE, synthesize_email,
)
from tests.factories import UserFactory


def test_email_is_username_plus_domain():
    assert synthesize_email("fazilah") == "fazilah@iku.com"


def test_sign_in_returns_role_from_account(session):
    UserFactory(username="sakinah", role=Role.ADMIN)
    user = AuthService.sign_in(session, "sakinah", "secret")
    assert (user.username, user.email, user.role) == ("sakinah", "sakinah@iku.com", Role.ADMIN)
    assert user.is_admin


def test_username_admin_is_not_automatically_admin(session):
    """Role comes from the stored account, not from the username text."""
    UserFactory(username="admin", role=Role.STAFF)
    user = AuthService.sign_in(session, "admin", "secret")
    assert user.role is Role.STAFF
    assert not user.is_admin


@pytest.mark.parametrize("username,password", [
    ("husna", "wrong"),
    ("nobody", "secret"),
    ("", "secret"),
    ("husna", ""),
])
def test_sign_in_failures_share_one_message(session, username, password):
    UserFactory(username="husna")
    with pytest.raises(AuthError) as exc:
        AuthService.sign_in(session, username, password)
    assert str(exc.value) == LOGIN_FAILED_MESSAGE == "Invalid username or password"


def test_create_user_hashes_password(session):
    user = AuthService.create_user(session, "alia", "pw", Role.STAFF)
    session.commit()
    assert user.email == "alia@iku.com"
    assert user.password_hash != "pw"
    assert session.query(User).filter(User.username == "alia").one().role is Role.STAFF


def test_create_user_rejects_duplicates(session):
    AuthService.create_user(session, "eyzan", "pw")
    with pytest.raises(ValueError):
        AuthService.create_user(session, "eyzan", "other")


def test_get_loads_account_by_session_id(session):
    """The id stored by the login cookie maps back to the account."""
    user = UserFactory(username="husna")
    assert AuthService.get(session, str(user.id)).username == "husna"
    assert AuthService.get(session, "999") is None
    assert AuthService.get(session, "not-a-number") is None
