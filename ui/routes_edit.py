"""
ui.routes_edit - Inline cell edits posted from the dashboard table.

Each edit is written straight through to storage.  The browser returns
to page 1 of the same filters, since the record set has changed.
"""

import logging

from flask import request, redirect, url_for, flash, abort
from flask_login import login_required

from ui import ui_bp
from db import get_session
from services.records_service import RecordsService

logger = logging.getLogger(__name__)


def _back_to_dashboard():
    args = {k: request.form.get(k, "") for k in ("status", "staff", "q")}
    return redirect(url_for("ui.index", **{k: v for k, v in args.items() if v}))


@ui_bp.route("/record/<record_id>/edit", methods=["POST"])
@login_required
def record_edit(record_id: str):
    field = request.form.get("field", "")
    value = request.form.get("value", "")

    session = get_session()
    try:
        record = RecordsService.get(session, record_id)
        if not record:
            abort(404)
        RecordsService.update_field(session, record, field, value)
        session.commit()
    except ValueError as exc:
        session.rollback()
        flash(f"Error: {exc}", "danger")
    finally:
        session.close()

    return _back_to_dashboard()
