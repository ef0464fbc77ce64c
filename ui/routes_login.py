"""
ui.routes_login - Sign-in form and sign-out.
"""

from flask import request, render_template, redirect, url_for
from flask_login import login_user, logout_user, current_user

from ui import ui_bp
from db import get_session
from services.auth_service import AuthService, AuthError


def _safe_next(target: str) -> str:
    """Only follow same-site relative redirects."""
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("ui.index")


@ui_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "GET":
        if current_user.is_authenticated:
            return redirect(url_for("ui.index"))
        return render_template("login.html", error=None, username="")

    username = request.form.get("username", "").strip()
    password = request.form.get("password", "")

    session = get_session()
    try:
        user = AuthService.sign_in(session, username, password)
    except AuthError as exc:
        return render_template("login.html", error=str(exc),
                               username=username), 401
    finally:
        session.close()

    login_user(user)
    return redirect(_safe_next(request.args.get("next", "")))


@ui_bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return redirect(url_for("ui.login"))
