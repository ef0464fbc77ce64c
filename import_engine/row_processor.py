"""
import_engine.row_processor - Transform one pasted row into Record fields.

Single-responsibility: given a list of cells, return a dict of Record
attributes.  No database access happens here.
"""

from __future__ import annotations

from import_engine.field_map import COLUMN_ORDER, STATUS_ALIASES


def normalize_status(value: str | None) -> str | None:
    """Map known status spellings to their canonical form."""
    if value is None:
        return None
    return STATUS_ALIASES.get(value, value)


def parse_row(cells: list[str]) -> dict:
    """
    Map cells to Record attributes by position.

    Missing trailing cells become None and surplus cells are dropped.
    """
    fields = {
        attr: (cells[idx] if idx < len(cells) else None)
        for idx, attr in enumerate(COLUMN_ORDER)
    }
    fields["status"] = normalize_status(fields["status"])
    return fields


def row_key(fields: dict) -> tuple[str, str]:
    """(control number, accession) pair for a parsed row."""
    return (fields.get("control_number") or "", fields.get("accession") or "")
