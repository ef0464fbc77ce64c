#!/usr/bin/env python3
"""
LIBREC - Library Record Management Web Application
===================================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging

from flask import Flask, render_template

import config
from db import init_db, get_session, User, Role
from api import api_bp
from ui import ui_bp
from cli import register_commands
from session_auth import login_manager

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(
        __name__,
        template_folder=str(config.BASE_DIR / "templates"),
        static_folder=str(config.BASE_DIR / "static"),
    )
    app.secret_key = config.SECRET

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Sign-in sessions ────────────────────────────────────────────
    login_manager.init_app(app)

    # ── Register blueprints and CLI ─────────────────────────────────
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)
    register_commands(app)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return render_template("error.html", code=404,
                               message="Page not found"), 404

    @app.errorhandler(500)
    def _500(e):
        return render_template("error.html", code=500,
                               message="Internal server error"), 500

    return app


def _seed_admin_if_empty():
    """Create the 'admin' account on first start when a password is configured."""
    from services.auth_service import AuthService

    session = get_session()
    try:
        if session.query(User).count() > 0:
            return
        if not config.ADMIN_PASSWORD:
            print("\n  No accounts yet - set LIBREC_ADMIN_PASSWORD or run "
                  "'flask --app main create-user'.")
            return
        AuthService.create_user(session, "admin", config.ADMIN_PASSWORD, Role.ADMIN)
        session.commit()
        logger.info("Seeded admin account")
    finally:
        session.close()


def main():
    configure_logging()

    print("=" * 56)
    print("  LIBREC - Senarai Buku IKU")
    print("=" * 56)

    app = create_app()
    print(f"  Database: {config.DB_URL}")
    _seed_admin_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
