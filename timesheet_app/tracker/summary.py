"""Per-year hour aggregation by task and by remark tag."""
from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .category import map_tag
from .models import Row, SummaryTable

_TAG_RE = re.compile(r"^(\w+): ", re.ASCII)


def extract_tags(task: str, remark: str) -> List[str]:
    """Collect ``tag: `` prefixes from each remark line.

    Remarks without tagged lines fall back to ``devop`` for setup work,
    ``dev`` for additions and finally to the task name itself.
    """

    tags = []
    for line in remark.split("\n"):
        match = _TAG_RE.match(line)
        if match:
            tags.append(map_tag(match.group(1).strip()))

    lowered = remark.lower()
    if not tags and "setup " in lowered:
        tags.append("devop")
    if not tags and "add " in lowered:
        tags.append("dev")
    if not tags:
        tags.append(task)
    return tags


def summarize(rows: Iterable[Row], default_year: int) -> Tuple[SummaryTable, SummaryTable]:
    """Return (tasks, tags) hour tables for every year in the log.

    A row's full duration goes to its task; for tags it is split evenly
    across the row's tags.
    """

    tasks = SummaryTable(file_prefix="tasks", label="Task")
    tags = SummaryTable(file_prefix="tags", label="Tag")
    for row in rows:
        year = row.year or default_year
        tasks.add(year, row.task, row.duration)
        row_tags = extract_tags(row.task, row.remark)
        share = row.duration / len(row_tags)
        for tag in row_tags:
            tags.add(year, tag, share)
    return tasks, tags
