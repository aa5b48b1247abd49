"""CSV and Excel export of hour summaries."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd

from timesheet_app.tracker.models import SummaryTable

LOGGER = logging.getLogger(__name__)

HOURS_COLUMN = "Total Hour"


def summary_frame(label: str, counts: Dict[str, float]) -> pd.DataFrame:
    return pd.DataFrame(list(counts.items()), columns=[label, HOURS_COLUMN])


class SummaryExporter:
    def __init__(self, summary_directory: Path):
        self.summary_directory = Path(summary_directory)

    def export(self, tables: Iterable[SummaryTable]) -> List[Path]:
        """Write ``<prefix>.<year>.csv`` per year and ``<prefix>.all.csv`` per table."""
        self.summary_directory.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for table in tables:
            for year in table.years():
                written.append(
                    self._save(f"{table.file_prefix}.{year}.csv", table.label, table.counts_by_year[year])
                )
            written.append(self._save(f"{table.file_prefix}.all.csv", table.label, table.totals()))
        LOGGER.info("Exported %s summary files to %s", len(written), self.summary_directory)
        return written

    def _save(self, name: str, label: str, counts: Dict[str, float]) -> Path:
        path = self.summary_directory / name
        summary_frame(label, counts).to_csv(path, index=False)
        return path

    def export_workbook(self, tables: Iterable[SummaryTable], export_path: Path) -> Path:
        """Write every table into one workbook, one sheet per year plus ``all``."""
        export_path = Path(export_path)
        export_path.parent.mkdir(parents=True, exist_ok=True)
        row_count = 0
        with pd.ExcelWriter(export_path, engine="openpyxl", mode="w") as writer:
            for table in tables:
                sheets = {str(year): table.counts_by_year[year] for year in table.years()}
                sheets["all"] = table.totals()
                for suffix, counts in sheets.items():
                    frame = summary_frame(table.label, counts)
                    frame.to_excel(writer, sheet_name=f"{table.file_prefix}.{suffix}", index=False)
                    row_count += len(frame)
            meta_df = pd.DataFrame([[datetime.now(), row_count]], columns=["ExportedAt", "RowCount"])
            meta_df.to_excel(writer, sheet_name="Meta", index=False)
        LOGGER.info("Exported summary workbook to %s", export_path)
        return export_path
