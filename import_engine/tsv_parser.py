"""
import_engine.tsv_parser - Low-level reading of pasted tab-separated text.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Line splitting that tolerates \r\n from browser textareas
  • Dropping blank lines
  • Returns (header, body_rows) as lists of cells
"""

from __future__ import annotations

from typing import Optional


def split_rows(raw: str | bytes) -> Optional[tuple[list[str], list[list[str]]]]:
    """
    Accept raw pasted content (bytes or str) and split it into a header
    row and body rows.  Returns None if content is empty.

    Cells are not trimmed: a title with a trailing space is stored with
    the trailing space.
    """
    text = _decode(raw)
    if not text or not text.strip():
        return None

    rows = [
        line.split("\t")
        for line in text.replace("\r\n", "\n").split("\n")
        if line.strip()
    ]
    if not rows:
        return None
    return rows[0], rows[1:]


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        # Strip UTF-8 BOM
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        return raw.decode("utf-8", errors="replace")
    if raw.startswith("\ufeff"):
        return raw[1:]
    return raw
