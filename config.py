"""
LIBREC - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent

load_dotenv(BASE_DIR / ".env")

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("LIBREC_DB", f"sqlite:///{BASE_DIR / 'librec.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("LIBREC_HOST", "0.0.0.0")
PORT   = int(os.environ.get("LIBREC_PORT", "5000"))
DEBUG  = os.environ.get("LIBREC_DEBUG", "0") == "1"
SECRET = os.environ.get("LIBREC_SECRET", "librec-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LIBREC_LOG_LEVEL", "INFO").upper()

# ── Accounts ───────────────────────────────────────────────────────────
# Sign-in takes a bare username; the account email is username@EMAIL_DOMAIN
EMAIL_DOMAIN   = os.environ.get("LIBREC_EMAIL_DOMAIN", "iku.com")
ADMIN_PASSWORD = os.environ.get("LIBREC_ADMIN_PASSWORD", "")

# ── Record vocabularies ────────────────────────────────────────────────
STATUSES: tuple[str, ...] = ("Complete", "Incomplete")
STAFF: tuple[str, ...] = tuple(
    s.strip() for s in os.environ.get(
        "LIBREC_STAFF", "FATIHAH,FAZILAH,SAKINAH,HUSNA,ALIA,EYZAN,USER",
    ).split(",") if s.strip()
)

# ── Pagination ─────────────────────────────────────────────────────────
PAGE_SIZE = 100
