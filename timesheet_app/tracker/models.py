"""Data models for the timesheet tracker."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

TASK_FIELD = "Task"
REMARK_FIELD = "Remark"
DURATION_FIELD = "Duration (hour)"
FROM_FIELD = "From"


def _parse_duration(raw: Optional[str]) -> float:
    try:
        value = float(raw or 0)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _parse_year(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        year = int(raw.split("-")[0].strip())
    except ValueError:
        return None
    return year or None


@dataclass
class Row:
    """One line of the timesheet log."""

    task: str
    remark: str
    duration: float = 0.0
    year: Optional[int] = None
    record: Dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def is_labeled(self) -> bool:
        return bool(self.task)

    @classmethod
    def from_record(cls, record: Mapping[str, Optional[str]], default_year: Optional[int] = None) -> "Row":
        year = _parse_year(record.get(FROM_FIELD))
        return cls(
            task=record.get(TASK_FIELD) or "",
            remark=record.get(REMARK_FIELD) or "",
            duration=_parse_duration(record.get(DURATION_FIELD)),
            year=year if year is not None else default_year,
            record={k: v for k, v in record.items() if k is not None},
        )

    def to_record(self) -> Dict[str, str]:
        """Return the raw CSV record with the current task written back."""
        record = dict(self.record)
        record[TASK_FIELD] = self.task
        record.setdefault(REMARK_FIELD, self.remark)
        return record


@dataclass
class TaskCandidate:
    """A task suggested for a remark with its probability."""

    task: str
    probability: float


@dataclass
class Prediction:
    """Ranked task candidates for one unlabeled remark."""

    remark: str
    candidates: List[TaskCandidate] = field(default_factory=list)

    @property
    def best(self) -> Optional[TaskCandidate]:
        return self.candidates[0] if self.candidates else None


@dataclass
class SummaryTable:
    """Hours per key (task or tag) grouped by year."""

    file_prefix: str
    label: str
    # year -> key -> hours
    counts_by_year: Dict[int, Dict[str, float]] = field(default_factory=dict)

    def add(self, year: int, key: str, amount: float) -> None:
        counts = self.counts_by_year.setdefault(year, {})
        counts[key] = counts.get(key, 0.0) + amount

    def years(self) -> List[int]:
        return sorted(self.counts_by_year)

    def totals(self) -> Dict[str, float]:
        total_counts: Dict[str, float] = {}
        for year in self.years():
            for key, amount in self.counts_by_year[year].items():
                total_counts[key] = total_counts.get(key, 0.0) + amount
        return total_counts
