"""
db - Database layer.

Public API:
    init_db()       → create engine + tables
    get_session()   → new Session
    Record, User    → ORM models
    Role            → account role enumeration
    RECORD_FIELDS, RECORD_HEADERS, EDITABLE_FIELDS → record table layout
"""

from db.engine import init_db, get_session              # noqa: F401
from db.models import Base, Record, User, Role          # noqa: F401
from db.models import RECORD_FIELDS, RECORD_HEADERS, EDITABLE_FIELDS  # noqa: F401
