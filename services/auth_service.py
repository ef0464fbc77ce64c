"""
services.auth_service - Account sign-in and creation.

Callers pass a bare username; it is turned into the account email by
appending the configured domain.  Admin rights come from the account's
role column, so renaming a user never changes rights.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

import config
from db.models import Role, User

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Invalid username or password"


class AuthError(Exception):
    """Raised when credentials are rejected."""

    def __init__(self, message: str = LOGIN_FAILED_MESSAGE):
        super().__init__(message)


def synthesize_email(username: str) -> str:
    return f"{username}@{config.EMAIL_DOMAIN}"


class AuthService:

    @staticmethod
    def sign_in(session: Session, username: str, password: str) -> User:
        """
        Verify credentials and return the matching account.
        Raises AuthError with a fixed message on any failure.
        """
        if not username or not password:
            raise AuthError()

        user = session.query(User).filter(
            User.email == synthesize_email(username)
        ).one_or_none()
        if user is None or not check_password_hash(user.password_hash, password):
            logger.info(f"Sign-in failed for {username!r}")
            raise AuthError()

        logger.info(f"Signed in {user.username} as {user.role.value}")
        return user

    @staticmethod
    def get(session: Session, user_id) -> User | None:
        try:
            return session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def create_user(
        session: Session,
        username: str,
        password: str,
        role: Role = Role.STAFF,
    ) -> User:
        """Add an account.  Raises ValueError if the username is taken."""
        username = username.strip()
        if not username or not password:
            raise ValueError("username and password are required")
        email = synthesize_email(username)
        if session.query(User).filter(User.email == email).count():
            raise ValueError(f"user {username!r} already exists")

        user = User(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role(role),
        )
        session.add(user)
        session.flush()
        logger.info(f"Created {user.role.value} account {username}")
        return user
