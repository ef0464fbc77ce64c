"""
services.filter_service - Client-side style filtering and pagination.

The whole record collection is fetched once and narrowed in Python:
status (exact), then staff (exact), then a substring match on title or
accession.  Any change to a filter or to the loaded records sends the
view back to page 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import config
from db.models import Record


def apply_filters(
    records: Sequence[Record],
    *,
    status: str = "",
    staff: str = "",
    search: str = "",
) -> list[Record]:
    """Return the records passing every non-empty filter, order preserved."""
    data = list(records)
    if status:
        data = [r for r in data if r.status == status]
    if staff:
        data = [r for r in data if r.staff == staff]
    if search:
        data = [
            r for r in data
            if search in (r.title or "") or search in (r.accession or "")
        ]
    return data


@dataclass
class Page:
    items: list
    page: int
    total_pages: int
    total: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def page_count(total: int, page_size: int = config.PAGE_SIZE) -> int:
    return max((total + page_size - 1) // page_size, 1)


def paginate(items: Sequence, page: int = 1, page_size: int = config.PAGE_SIZE) -> Page:
    """Slice one page out of ``items``; out-of-range pages are clamped."""
    total = len(items)
    total_pages = page_count(total, page_size)
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return Page(list(items[start:start + page_size]), page, total_pages, total)


@dataclass
class RecordFilter:
    """
    Dashboard view state: loaded records, the three filter inputs and
    the current page.
    """
    page_size: int = config.PAGE_SIZE
    records: list = field(default_factory=list)
    status: str = ""
    staff: str = ""
    search: str = ""
    page: int = 1
    filtered: list = field(default_factory=list, init=False)

    def __post_init__(self):
        self._recompute()

    # ── Inputs that trigger a recomputation ────────────────────────────

    def load(self, records: Sequence[Record]) -> None:
        self.records = list(records)
        self._recompute()

    def set_status(self, status: str) -> None:
        self.status = status or ""
        self._recompute()

    def set_staff(self, staff: str) -> None:
        self.staff = staff or ""
        self._recompute()

    def set_search(self, search: str) -> None:
        self.search = search or ""
        self._recompute()

    # ── Navigation ─────────────────────────────────────────────────────

    @property
    def total_pages(self) -> int:
        return page_count(len(self.filtered), self.page_size)

    def go_to(self, page: int) -> None:
        self.page = min(max(page, 1), self.total_pages)

    def next_page(self) -> None:
        self.go_to(self.page + 1)

    def prev_page(self) -> None:
        self.go_to(self.page - 1)

    def current(self) -> Page:
        return paginate(self.filtered, self.page, self.page_size)

    def _recompute(self) -> None:
        self.filtered = apply_filters(
            self.records, status=self.status, staff=self.staff, search=self.search,
        )
        self.page = 1
