"""Command line entry point for Timesheet Tracker."""
from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Sequence

from timesheet_app.core.inference_service import InferenceService
from timesheet_app.tracker import __version__
from timesheet_app.tracker.controllers import CONFIG_DIR, CONFIG_FILE, AppController, ConfigManager
from timesheet_app.tracker.storage import Storage

LOG_DIR = CONFIG_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def configure_logging(level: int = logging.INFO) -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(LOG_FILE, maxBytes=1024 * 1024, backupCount=3)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[handler, logging.StreamHandler()],
    )
    logging.info("Timesheet Tracker v%s starting", __version__)


def build_controller(config_manager: ConfigManager) -> AppController:
    from reports.summary_export import SummaryExporter

    config = config_manager.config
    storage = Storage(Path(config.log_sheet_file))
    exporter = SummaryExporter(Path(config.summary_directory))
    return AppController(storage, exporter, config_manager)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="timesheet", description="Summarize a timesheet log and infer missing tasks.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", type=Path, default=CONFIG_FILE, help="TOML configuration file")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summarize", help="write per-year task and tag hour summaries")
    summary.add_argument("--workbook", action="store_true", help="also write an Excel workbook")
    summary.add_argument("--charts", action="store_true", help="also render hour charts")

    infer = sub.add_parser("infer", help="suggest tasks for rows without one")
    infer.add_argument("--apply", action="store_true", help="write the best task of each row to the draft file")
    infer.add_argument("--min-probability", type=float, default=None, help="hide tasks below this probability")
    infer.add_argument("--limit", type=positive_int, default=None, help="maximum tasks shown per remark")
    return p


def run_summarize(controller: AppController, args: argparse.Namespace) -> int:
    for path in controller.export_summaries(workbook=args.workbook, charts=args.charts):
        print(path)
    return 0


def run_infer(controller: AppController, args: argparse.Namespace) -> int:
    service = InferenceService(controller, min_probability=args.min_probability, limit=args.limit)
    for prediction in service.review():
        print(service.render(prediction))
    if args.apply:
        filled = service.apply()
        print(f"Filled {filled} task(s) in {controller.config.draft_file}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    controller = build_controller(ConfigManager(args.config))
    handlers = {"summarize": run_summarize, "infer": run_infer}
    try:
        return handlers[args.command](controller, args)
    except FileNotFoundError as exc:
        sys.stderr.write(f"Log sheet not found: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
