"""
services.kpi_service - Dashboard counters.

Always fed the full record set, never a filtered view.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Sequence

from db.models import Record


@dataclass(frozen=True)
class Kpis:
    total: int
    complete: int
    incomplete: int
    staff_active: int

    def to_dict(self) -> dict:
        return asdict(self)


def compute_kpis(records: Sequence[Record]) -> Kpis:
    return Kpis(
        total=len(records),
        complete=sum(1 for r in records if r.status == "Complete"),
        incomplete=sum(1 for r in records if r.status == "Incomplete"),
        staff_active=len({r.staff for r in records if r.staff}),
    )
