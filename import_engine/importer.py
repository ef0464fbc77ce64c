"""
import_engine.importer - Top-level orchestrator.

Coordinates tsv_parser → row_processor → duplicate check → one
transactional commit, and produces a structured ImportReport.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from db.engine import get_session
from db.models import Record
from import_engine.field_map import COLUMN_ORDER
from import_engine.tsv_parser import split_rows
from import_engine.row_processor import parse_row, row_key
from import_engine.duplicates import find_duplicates
from import_engine.report import ImportReport

logger = logging.getLogger(__name__)


def run_import(file_content: str | bytes) -> ImportReport:
    """
    Import a pasted tab-separated blob into the database.

    The first non-blank line is the header and is skipped.  If any row's
    (control number, accession) pair is already stored, or repeats an
    earlier row of the paste, nothing is written.

    Parameters
    ----------
    file_content : raw pasted text (bytes or str)

    Returns
    -------
    ImportReport; ``report.ok`` is False when the batch was rejected
    """
    report = ImportReport()
    split = split_rows(file_content)
    if split is None:
        report.add_error(0, "Nothing to import: paste is empty")
        return report

    _header, body = split
    if not body:
        report.add_error(0, "Nothing to import: only a header row was pasted")
        return report

    parsed: list[tuple[int, dict]] = []
    for row_idx, cells in enumerate(body, start=2):   # row 1 = header
        report.total_rows += 1
        if len(cells) < len(COLUMN_ORDER):
            report.add_warning(
                row_idx, f"{len(cells)} of {len(COLUMN_ORDER)} columns present",
            )
        parsed.append((row_idx, parse_row(cells)))

    session = get_session()
    try:
        existing = session.query(Record.control_number, Record.accession).all()
        dupes = find_duplicates(
            ((c or "", a or "") for c, a in existing),
            [(row_idx, row_key(fields)) for row_idx, fields in parsed],
        )
        if dupes:
            report.reject_duplicates(dupes)
            logger.warning(
                f"Import rejected: {len(dupes)} duplicate key(s) "
                f"in {report.total_rows} rows"
            )
            return report

        now = datetime.now(timezone.utc)
        session.add_all(
            Record(created_at=now, updated_at=now, **fields)
            for _row_idx, fields in parsed
        )
        session.commit()
        report.imported = len(parsed)
        logger.info(f"Imported {report.imported} records")
    except Exception as exc:
        session.rollback()
        report.imported = 0
        report.add_error(0, f"Fatal import error: {exc}")
        logger.exception("Import failed, batch rolled back")
    finally:
        session.close()

    return report
