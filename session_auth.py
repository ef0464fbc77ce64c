"""
session_auth - Flask-Login wiring shared by both blueprints.

HTML routes bounce anonymous visitors to the login page; API routes
answer with a JSON 401/403 instead.
"""

from __future__ import annotations

from functools import wraps

from flask import request, redirect, url_for, jsonify, flash
from flask_login import LoginManager, current_user, login_required

from db import get_session
from services.auth_service import AuthService

login_manager = LoginManager()


@login_manager.user_loader
def load_user(user_id: str):
    session = get_session()
    try:
        return AuthService.get(session, user_id)
    finally:
        session.close()


@login_manager.unauthorized_handler
def unauthorized():
    if request.blueprint == "api":
        return jsonify({"error": "authentication required"}), 401
    return redirect(url_for("ui.login", next=request.full_path))


def admin_required(view):
    """login_required plus an admin role check."""
    @wraps(view)
    @login_required
    def wrapper(*args, **kwargs):
        if not current_user.is_admin:
            if request.blueprint == "api":
                return jsonify({"error": "admin role required"}), 403
            flash("Only administrators can import records.", "danger")
            return redirect(url_for("ui.index"))
        return view(*args, **kwargs)
    return wrapper
