"""Controllers orchestrating configuration, the log sheet and summary exports."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from timesheet_app.ml.tfidf import Model, train

from .models import Row
from .storage import Storage
from .summary import summarize

if TYPE_CHECKING:
    from reports.summary_export import SummaryExporter

LOGGER = logging.getLogger(__name__)


CONFIG_DIR = Path.home() / ".timesheet"
CONFIG_FILE = CONFIG_DIR / "config.toml"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default_config.toml"


@dataclass
class AppConfig:
    log_sheet_file: str
    summary_directory: str
    draft_file: str
    default_year: Optional[int] = None
    min_probability: float = 0.05
    max_candidates: int = 5
    workbook_file: str = "res/summary/summary.xlsx"
    chart_directory: str = "res/summary/charts"

    @classmethod
    def from_toml(cls, data: dict) -> "AppConfig":
        raw_year = data.get("default_year")
        default_year: Optional[int]
        if raw_year in (None, "", 0, "0"):
            default_year = None
        else:
            try:
                default_year = int(raw_year)
            except (TypeError, ValueError):
                default_year = None
        return cls(
            log_sheet_file=data.get("log_sheet_file", "res/log-sheet.csv"),
            summary_directory=data.get("summary_directory", "res/summary"),
            draft_file=data.get("draft_file", "res/draft.csv"),
            default_year=default_year,
            min_probability=float(data.get("min_probability", 0.05)),
            max_candidates=int(data.get("max_candidates", 5)),
            workbook_file=data.get("workbook_file", "res/summary/summary.xlsx"),
            chart_directory=data.get("chart_directory", "res/summary/charts"),
        )

    def to_toml(self) -> str:
        lines = [
            f"log_sheet_file = \"{self.log_sheet_file}\"",
            f"summary_directory = \"{self.summary_directory}\"",
            f"draft_file = \"{self.draft_file}\"",
            f"workbook_file = \"{self.workbook_file}\"",
            f"chart_directory = \"{self.chart_directory}\"",
            f"default_year = {self.default_year or 0}",
            f"min_probability = {self.min_probability}",
            f"max_candidates = {self.max_candidates}",
        ]
        return "\n".join(lines) + "\n"

    @property
    def year(self) -> int:
        """Year for rows without a ``From`` date."""
        return self.default_year or date.today().year


class ConfigManager:
    def __init__(self, config_file: Path = CONFIG_FILE) -> None:
        self.config_file = Path(config_file)
        self.config = self._load()

    def _load(self) -> AppConfig:
        if self.config_file.exists():
            with open(self.config_file, "rb") as fh:
                data = tomllib.load(fh)
                return AppConfig.from_toml(data)
        with open(DEFAULT_CONFIG_PATH, "rb") as fh:
            data = tomllib.load(fh)
            config = AppConfig.from_toml(data)
            self.save(config)
            return config

    def save(self, config: Optional[AppConfig] = None) -> None:
        cfg = config or self.config
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(cfg.to_toml(), encoding="utf-8")
        LOGGER.info("Saved configuration to %s", self.config_file)


class AppController:
    def __init__(self, storage: Storage, exporter: SummaryExporter, config_manager: ConfigManager) -> None:
        self.storage = storage
        self.exporter = exporter
        self.config_manager = config_manager
        self._rows: Optional[List[Row]] = None

    @property
    def config(self) -> AppConfig:
        return self.config_manager.config

    # Log sheet
    def list_rows(self) -> List[Row]:
        if self._rows is None:
            self._rows = self.storage.read_rows(default_year=self.config.year)
        return self._rows

    def unlabeled_rows(self) -> List[Row]:
        return [row for row in self.list_rows() if not row.is_labeled]

    def save_draft(self, path: Optional[Path] = None) -> Path:
        return self.storage.write_draft(self.list_rows(), Path(path or self.config.draft_file))

    # Inference
    def train_model(self) -> Model:
        return train(self.list_rows())

    # Summaries
    def export_summaries(self, workbook: bool = False, charts: bool = False) -> List[Path]:
        tables = summarize(self.list_rows(), self.config.year)
        written = self.exporter.export(tables)
        if workbook:
            written.append(self.exporter.export_workbook(tables, Path(self.config.workbook_file)))
        if charts:
            from reports.charts import render_hours_chart

            chart_dir = Path(self.config.chart_directory)
            for table in tables:
                written.append(render_hours_chart(table, chart_dir / f"{table.file_prefix}.all.png"))
        return written
