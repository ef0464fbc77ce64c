"""
ui.routes_import - Admin bulk paste of tab-separated records.
"""

from flask import request, redirect, url_for, flash

from ui import ui_bp
from ui.routes_dashboard import render_dashboard
from import_engine import run_import
from session_auth import admin_required


def _describe(dup: dict) -> str:
    where = ("an existing record" if dup["against"] == "existing"
             else f"row {dup['first_row']}")
    return (f"row {dup['row']} ({dup['control_number']} / {dup['accession']}) "
            f"duplicates {where}")


@ui_bp.route("/import", methods=["POST"])
@admin_required
def import_records():
    mass_data = request.form.get("mass_data", "")
    report = run_import(mass_data)

    if report.duplicates:
        flash("Duplicate record detected. Import rejected.", "danger")
        for dup in report.duplicates[:10]:
            flash(_describe(dup), "warning")
        return render_dashboard(mass_data=mass_data, status_code=409)
    if not report.ok:
        for err in report.errors:
            flash(err["reason"], "danger")
        return render_dashboard(mass_data=mass_data, status_code=400)

    flash("All records imported successfully. Data verified.", "success")
    for warn in report.warnings[:10]:
        flash(f"Row {warn['row']}: {warn['reason']}", "warning")
    return redirect(url_for("ui.index"))
