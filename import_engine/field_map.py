"""
import_engine.field_map - Column position ↔ model-attribute mapping.

Pasted rows carry no reliable header names, so columns are mapped
strictly by position, in the Record attribute order.
"""

from db.models import RECORD_FIELDS

# Column index  →  Record model attribute
COLUMN_ORDER: tuple[str, ...] = RECORD_FIELDS

# Status spellings rewritten on import; anything else is kept as typed
STATUS_ALIASES: dict[str, str] = {
    "Completed": "Complete",
}
