"""
api.routes_auth - /api/v1/auth session endpoints.
"""

from flask import request, jsonify
from flask_login import login_user, logout_user, login_required, current_user

from api import api_bp
from db import get_session
from services.auth_service import AuthService, AuthError


def _whoami(user) -> dict:
    return {"username": user.username, "email": user.email, "role": user.role.value}


@api_bp.route("/auth/login", methods=["POST"])
def api_login():
    """POST /api/v1/auth/login  JSON body: {username, password}"""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object"}), 400

    session = get_session()
    try:
        user = AuthService.sign_in(
            session,
            str(data.get("username", "")).strip(),
            str(data.get("password", "")),
        )
    except AuthError as exc:
        return jsonify({"error": str(exc)}), 401
    finally:
        session.close()

    login_user(user)
    return jsonify(_whoami(user))


@api_bp.route("/auth/logout", methods=["POST"])
@login_required
def api_logout():
    logout_user()
    return jsonify({"ok": True})


@api_bp.route("/auth/me")
@login_required
def api_me():
    return jsonify(_whoami(current_user))
