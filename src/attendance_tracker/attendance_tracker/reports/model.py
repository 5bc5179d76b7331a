from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import REPORT_PERCENT_DECIMALS


@dataclass(frozen=True)
class SubjectReport:
    """Read-model: roll-up of every entry sharing one subject name."""

    subject: str
    total: int
    present: int

    @property
    def percentage(self) -> str:
        return f"{self.present / self.total * 100:.{REPORT_PERCENT_DECIMALS}f}"

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "total": self.total,
            "present": self.present,
            "percentage": self.percentage,
        }
