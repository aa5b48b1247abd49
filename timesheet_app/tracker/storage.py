"""CSV-backed access to the timesheet log sheet."""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .models import DURATION_FIELD, REMARK_FIELD, TASK_FIELD, Row

LOGGER = logging.getLogger(__name__)

DEFAULT_FIELDS = [TASK_FIELD, DURATION_FIELD, REMARK_FIELD]


class Storage:
    """Reads the log sheet and writes drafts with inferred tasks."""

    def __init__(self, log_sheet: Path) -> None:
        self.log_sheet = Path(log_sheet)
        self.fieldnames: List[str] = []

    def read_rows(self, default_year: Optional[int] = None) -> List[Row]:
        if not self.log_sheet.exists():
            LOGGER.error("Log sheet not found: %s", self.log_sheet)
            raise FileNotFoundError(self.log_sheet)
        with self.log_sheet.open("r", newline="", encoding="utf-8-sig") as fh:
            reader = csv.DictReader(fh)
            rows = [Row.from_record(record, default_year=default_year) for record in reader]
            self.fieldnames = list(reader.fieldnames or [])
        LOGGER.info("Loaded %s rows from %s", len(rows), self.log_sheet)
        return rows

    def write_draft(self, rows: Iterable[Row], path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        records = [row.to_record() for row in rows]
        fieldnames = list(self.fieldnames or DEFAULT_FIELDS)
        for record in records:
            for key in record:
                if key not in fieldnames:
                    fieldnames.append(key)
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.DictWriter(fh, fieldnames=fieldnames, restval="")
            writer.writeheader()
            writer.writerows(records)
        LOGGER.info("Wrote %s rows to %s", len(records), path)
        return path
