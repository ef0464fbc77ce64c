"""
import_engine.report - Structured result of a bulk import run.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImportReport:
    total_rows: int = 0
    imported: int = 0
    rejected: bool = False
    duplicates: list[dict] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)     # [{row, reason}]
    warnings: list[dict] = field(default_factory=list)   # [{row, reason}]

    def add_error(self, row: int, reason: str):
        self.errors.append({"row": row, "reason": reason})
        self.rejected = True

    def add_warning(self, row: int, reason: str):
        self.warnings.append({"row": row, "reason": reason})

    def reject_duplicates(self, duplicates: list[dict]):
        self.duplicates.extend(duplicates)
        self.rejected = True

    @property
    def ok(self) -> bool:
        return not self.rejected

    def to_dict(self) -> dict:
        return {
            "total_rows": self.total_rows,
            "imported": self.imported,
            "rejected": self.rejected,
            "duplicates": self.duplicates,
            "errors": self.errors,
            "warnings": self.warnings,
        }
