"""
import_engine.duplicates - Batch-wide (control number, accession) check.

Every incoming key is compared against the keys already in storage and
against every earlier row of the same batch, so a batch either passes as
a whole or is rejected as a whole.
"""

from __future__ import annotations

from typing import Iterable

EXISTING = "existing"
BATCH = "batch"


def find_duplicates(
    existing_keys: Iterable[tuple[str, str]],
    rows: list[tuple[int, tuple[str, str]]],
) -> list[dict]:
    """
    Return one entry per colliding incoming row.

    Parameters
    ----------
    existing_keys : keys of records already stored
    rows          : (row_number, key) for each incoming row, in paste order

    Each entry is {row, control_number, accession, against, first_row}
    where ``against`` is EXISTING or BATCH and ``first_row`` names the
    earlier row for batch collisions.
    """
    existing = set(existing_keys)
    seen: dict[tuple[str, str], int] = {}
    dupes: list[dict] = []

    for row_no, key in rows:
        if key in existing:
            dupes.append(_entry(row_no, key, EXISTING, None))
        elif key in seen:
            dupes.append(_entry(row_no, key, BATCH, seen[key]))
        else:
            seen[key] = row_no
    return dupes


def _entry(row_no: int, key: tuple[str, str], against: str, first_row) -> dict:
    return {
        "row": row_no,
        "control_number": key[0],
        "accession": key[1],
        "against": against,
        "first_row": first_row,
    }
