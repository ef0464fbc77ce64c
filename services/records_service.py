"""
services.records_service - Read and inline-edit operations on Records.

All session management is the caller's responsibility (open before,
close/commit after).  Records are only ever created by the import
engine and are never deleted.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from sqlalchemy.orm import Session

import config
from db.models import Record, EDITABLE_FIELDS

logger = logging.getLogger(__name__)


def sequence_sortkey(no: str | None) -> tuple:
    """
    Natural sort key for the pasted NO column: "2" before "10",
    non-numeric values after all numbers.
    """
    match = re.match(r"^\s*(\d+)", no or "")
    if match:
        return (0, int(match.group(1)), no)
    return (1, 0, no or "")


def _naive(ts: datetime | None) -> datetime:
    # SQLite hands back naive datetimes; objects still in the session may be aware
    if ts is None:
        return datetime.min
    return ts.replace(tzinfo=None)


class RecordsService:

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def list_all(session: Session) -> list[Record]:
        """Whole collection, oldest import first, NO order within a batch."""
        records = session.query(Record).all()
        records.sort(key=lambda r: (_naive(r.created_at), sequence_sortkey(r.no)))
        return records

    @staticmethod
    def get(session: Session, record_id: str) -> Record | None:
        return session.get(Record, record_id)

    # ── Update ─────────────────────────────────────────────────────────

    @staticmethod
    def update_field(session: Session, record: Record, field: str, value) -> Record:
        """
        Replace one editable field and stamp updated_at.

        The (control number, accession) pair is not re-checked here.
        Raises ValueError for read-only fields or out-of-vocabulary
        status / staff values.
        """
        if not isinstance(field, str) or field not in EDITABLE_FIELDS:
            raise ValueError(f"field {field!r} is not editable")

        value = "" if value is None else str(value)
        if field == "status" and value not in config.STATUSES:
            raise ValueError(f"unknown status {value!r}")
        if field == "staff" and value not in config.STAFF:
            raise ValueError(f"unknown staff {value!r}")

        setattr(record, field, value)
        record.updated_at = datetime.now(timezone.utc)
        session.flush()
        logger.info(f"Record {record.id}: {field} updated")
        return record
