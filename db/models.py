"""
db.models - SQLAlchemy ORM declarations.

Tables
------
records - one row per catalogue entry.  Every column except the
          timestamps holds the pasted cell text verbatim, so dates and
          sequence numbers stay strings.
users   - sign-in accounts.  The role column is the only source of
          admin rights.
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone

from flask_login import UserMixin
from sqlalchemy import Column, String, Integer, DateTime, Text, Enum, Index
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def _iso_utc(ts: datetime | None) -> str:
    """ISO-8601 with an explicit UTC offset.  SQLite returns naive UTC values."""
    if ts is None:
        return ""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat()


# ── Record layout ─────────────────────────────────────────────────────
# Attribute order doubles as the pasted column order and the table order
RECORD_FIELDS: tuple[str, ...] = (
    "no",
    "control_number",
    "call_no_082",
    "call_no_050_060",
    "accession",
    "title",
    "status",
    "staff",
    "date",
)

RECORD_HEADERS: dict[str, str] = {
    "no":              "NO",
    "control_number":  "CONTROL NUMBER",
    "call_no_082":     "CALL NO (082)",
    "call_no_050_060": "CALL NO (050/060)",
    "accession":       "ACCESSION",
    "title":           "TITLE",
    "status":          "STATUS",
    "staff":           "STAFF",
    "date":            "DATE",
}

# Fields with an inline control on the dashboard
EDITABLE_FIELDS = frozenset({
    "control_number",
    "call_no_050_060",
    "status",
    "staff",
    "date",
})


class Base(DeclarativeBase):
    pass


class Role(str, enum.Enum):
    ADMIN = "admin"
    STAFF = "staff"


class Record(Base):
    __tablename__ = "records"

    # ── Server-assigned identity ───────────────────────────────────────
    id = Column(String(32), primary_key=True, default=_new_id)

    # ── Catalogue columns (import order) ───────────────────────────────
    no              = Column(String(50))
    control_number  = Column(String(100), index=True)
    call_no_082     = Column(String(200))
    call_no_050_060 = Column(String(200))
    accession       = Column(String(100), index=True)
    title           = Column(Text)
    status          = Column(String(50), index=True)
    staff           = Column(String(100), index=True)
    date            = Column(String(50))

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow)

    # Not unique: the pair is only checked by the bulk importer
    __table_args__ = (
        Index("ix_control_accession", "control_number", "accession"),
    )

    @property
    def key(self) -> tuple[str, str]:
        """(control number, accession) identity pair."""
        return (self.control_number or "", self.accession or "")

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "no": self.no,
            "control_number": self.control_number,
            "call_no_082": self.call_no_082,
            "call_no_050_060": self.call_no_050_060,
            "accession": self.accession,
            "title": self.title,
            "status": self.status,
            "staff": self.staff,
            "date": self.date,
            "created_at": _iso_utc(self.created_at),
            "updated_at": _iso_utc(self.updated_at),
        }


class User(UserMixin, Base):
    """
    A sign-in account.

    Users authenticate with a bare username; the stored email is the
    username with the configured domain appended.
    """
    __tablename__ = "users"

    id            = Column(Integer, primary_key=True, autoincrement=True)
    username      = Column(String(100), unique=True, nullable=False)
    email         = Column(String(200), unique=True, nullable=False, index=True)
    password_hash = Column(String(300), nullable=False)
    role          = Column(Enum(Role, values_callable=lambda e: [m.value for m in e]),
                           nullable=False, default=Role.STAFF)
    created_at    = Column(DateTime, default=_utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value if self.role else None,
        }
