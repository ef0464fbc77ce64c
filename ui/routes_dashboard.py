"""
ui.routes_dashboard - KPI cards, filters and the paginated record table.
"""

from flask import request, render_template
from flask_login import login_required

import config
from ui import ui_bp
from db import get_session
from db.models import RECORD_FIELDS, RECORD_HEADERS, EDITABLE_FIELDS
from services.records_service import RecordsService
from services.filter_service import RecordFilter
from services.kpi_service import compute_kpis


def render_dashboard(mass_data: str = "", status_code: int = 200):
    """
    Fetch every record, apply the query-string filters and render.

    Shared with the import route so a rejected paste can be shown again
    in the textarea.
    """
    session = get_session()
    try:
        records = RecordsService.list_all(session)
    finally:
        session.close()

    view = RecordFilter(
        records=records,
        status=request.args.get("status", "").strip(),
        staff=request.args.get("staff", "").strip(),
        search=request.args.get("q", ""),
    )
    view.go_to(request.args.get("page", 1, type=int))

    return render_template(
        "index.html",
        page=view.current(),
        status=view.status, staff=view.staff, q=view.search,
        kpis=compute_kpis(records),
        columns=RECORD_FIELDS, headers=RECORD_HEADERS, editable=EDITABLE_FIELDS,
        statuses=config.STATUSES, staff_names=config.STAFF,
        mass_data=mass_data,
    ), status_code


@ui_bp.route("/")
@login_required
def index():
    return render_dashboard()
