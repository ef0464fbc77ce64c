"""
api.routes_records - /api/v1/records listing and inline edit.
"""

from flask import request, jsonify
from flask_login import login_required

import config
from api import api_bp
from db import get_session
from db.models import RECORD_FIELDS, RECORD_HEADERS, EDITABLE_FIELDS
from services.records_service import RecordsService
from services.filter_service import RecordFilter
from services.kpi_service import compute_kpis


@api_bp.route("/records")
@login_required
def list_records():
    """
    GET /api/v1/records?status=&staff=&q=&page=1

    Fetches the whole collection, then filters and pages it.  KPIs are
    computed from the unfiltered collection.
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
    page = view.current()
    return jsonify({
        "total": page.total,
        "page": page.page,
        "total_pages": page.total_pages,
        "records": [r.to_dict() for r in page.items],
        "kpis": compute_kpis(records).to_dict(),
    })


@api_bp.route("/records/<record_id>")
@login_required
def get_record(record_id: str):
    """GET /api/v1/records/{id}"""
    session = get_session()
    try:
        record = RecordsService.get(session, record_id)
        if not record:
            return jsonify({"error": "not found"}), 404
        return jsonify(record.to_dict())
    finally:
        session.close()


@api_bp.route("/records/<record_id>", methods=["PATCH"])
@login_required
def edit_record(record_id: str):
    """PATCH /api/v1/records/{id}  JSON body: {field, value}"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    field = data.get("field", "")
    if not isinstance(field, str):
        return jsonify({"error": "field must be a string"}), 400
    session = get_session()
    try:
        record = RecordsService.get(session, record_id)
        if not record:
            return jsonify({"error": "not found"}), 404
        RecordsService.update_field(session, record, field, data.get("value"))
        session.commit()
        return jsonify(record.to_dict())
    except ValueError as exc:
        session.rollback()
        return jsonify({"error": str(exc)}), 400
    finally:
        session.close()


@api_bp.route("/kpis")
@login_required
def kpis():
    """GET /api/v1/kpis"""
    session = get_session()
    try:
        return jsonify(compute_kpis(RecordsService.list_all(session)).to_dict())
    finally:
        session.close()


@api_bp.route("/meta")
@login_required
def meta():
    """Vocabularies and column layout for clients building their own table."""
    return jsonify({
        "statuses": list(config.STATUSES),
        "staff": list(config.STAFF),
        "columns": [{"field": f, "header": RECORD_HEADERS[f],
                     "editable": f in EDITABLE_FIELDS} for f in RECORD_FIELDS],
        "page_size": config.PAGE_SIZE,
    })
