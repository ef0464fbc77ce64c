"""
api.routes_import - /api/v1/import endpoint.

Accepts tab-separated text via multipart file upload or raw request body.
"""

from flask import request, jsonify

from api import api_bp
from import_engine import run_import
from session_auth import admin_required


@api_bp.route("/import", methods=["POST"])
@admin_required
def api_import_tsv():
    """
    POST /api/v1/import

    Multipart: field name 'tsv_file'
    Or: raw text as request body (Content-Type: text/tab-separated-values).

    201 when every row was stored, 409 when duplicates rejected the
    batch, 400 for an empty paste or a rolled-back write.
    """
    if request.content_type and "multipart" in request.content_type:
        f = request.files.get("tsv_file")
        if not f:
            return jsonify({"error": "no tsv_file in upload"}), 400
        content = f.read()
    else:
        content = request.get_data()

    if not content:
        return jsonify({"error": "empty body"}), 400

    report = run_import(content)
    if report.ok:
        status = 201
    elif report.duplicates:
        status = 409
    else:
        status = 400
    return jsonify(report.to_dict()), status
