import pytest

from timesheet_app.tracker.category import map_tag
from timesheet_app.tracker.models import Row
from timesheet_app.tracker.summary import extract_tags, summarize


def test_map_tag():
    assert map_tag("feat") == "dev:feat"
    assert map_tag("faet") == "dev:feat"
    assert map_tag("deploy") == "devop:deploy"
    assert map_tag("taem") == "team"
    assert map_tag("adocs") == "operation"
    assert map_tag("review") == "review"


def test_extract_tags_per_line():
    remark = "team: brief dataset\nfeat: add export\nnot a tag line"
    assert extract_tags("task", remark) == ["team", "dev:feat"]


def test_extract_tags_requires_line_start():
    assert extract_tags("task", " feat: indented") == ["task"]
    assert extract_tags("task", "feat:no space") == ["task"]


def test_extract_tags_fallbacks():
    assert extract_tags("infra", "Setup docker compose") == ["devop"]
    assert extract_tags("web", "Add login button") == ["dev"]
    assert extract_tags("web", "review pull request") == ["web"]
    assert extract_tags("", "") == [""]


def test_summarize_splits_tag_hours():
    rows = [
        Row("media-search", "wip: add types", 1.0, 2024),
        Row("media-search", "feat: unify search\nperf: cache", 0.5, 2025),
        Row("format-html-cli", "restore casing", 0.2, None),
    ]
    tasks, tags = summarize(rows, default_year=2025)

    assert tasks.years() == [2024, 2025]
    assert tasks.counts_by_year[2024] == {"media-search": 1.0}
    assert tasks.counts_by_year[2025] == {"media-search": 0.5, "format-html-cli": 0.2}
    assert tasks.totals() == {"media-search": 1.5, "format-html-cli": 0.2}

    assert tags.counts_by_year[2024] == {"dev:wip": 1.0}
    assert tags.counts_by_year[2025] == {
        "dev:feat": 0.25,
        "dev:perf": 0.25,
        "format-html-cli": pytest.approx(0.2),
    }
    assert list(tags.totals()) == ["dev:wip", "dev:feat", "dev:perf", "format-html-cli"]
