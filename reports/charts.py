"""Bar charts of summarized hours."""
from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from timesheet_app.tracker.models import SummaryTable  # noqa: E402

LOGGER = logging.getLogger(__name__)


def render_hours_chart(table: SummaryTable, path: Path) -> Path:
    """Render all-time hours per key, largest first, to a PNG file."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    totals = sorted(table.totals().items(), key=lambda kv: kv[1], reverse=True)
    keys = [key or "(none)" for key, _hours in totals]
    hours = [value for _key, value in totals]

    fig, ax = plt.subplots(figsize=(max(4, len(keys) * 0.6), 3))
    ax.bar(keys, hours, color="#4c6ef5")
    ax.set_ylabel("Hours")
    ax.set_title(f"Hours by {table.label.lower()}")
    ax.tick_params(axis="x", rotation=30)
    fig.tight_layout()
    fig.savefig(path, format="png")
    plt.close(fig)
    LOGGER.info("Rendered %s chart to %s", table.label, path)
    return path
