from timesheet_app.tracker.models import Prediction, Row, SummaryTable, TaskCandidate


def test_row_from_record():
    record = {"Task": "website", "Remark": "feat: form", "Duration (hour)": "1.5", "From": "2024-03-01 10:00"}
    row = Row.from_record(record, default_year=2020)
    assert row.task == "website"
    assert row.remark == "feat: form"
    assert row.duration == 1.5
    assert row.year == 2024
    assert row.is_labeled is True


def test_row_from_record_handles_blanks():
    row = Row.from_record({"Task": "", "Remark": None, "Duration (hour)": "abc", "From": ""}, default_year=2025)
    assert row.task == ""
    assert row.remark == ""
    assert row.duration == 0.0
    assert row.year == 2025
    assert row.is_labeled is False


def test_row_from_record_missing_fields():
    row = Row.from_record({})
    assert (row.task, row.remark, row.duration, row.year) == ("", "", 0.0, None)


def test_row_to_record_writes_task_back():
    row = Row.from_record({"Task": "", "Remark": "demo", "Extra": "x"})
    row.task = "animal-ai"
    assert row.to_record() == {"Task": "animal-ai", "Remark": "demo", "Extra": "x"}


def test_prediction_best():
    assert Prediction("remark").best is None
    prediction = Prediction("remark", [TaskCandidate("a", 0.7), TaskCandidate("b", 0.3)])
    assert prediction.best.task == "a"


def test_summary_table_totals_by_year():
    table = SummaryTable("tasks", "Task")
    table.add(2025, "b", 1.0)
    table.add(2024, "a", 2.0)
    table.add(2025, "a", 0.5)
    assert table.years() == [2024, 2025]
    assert table.totals() == {"a": 2.5, "b": 1.0}
    assert list(table.totals()) == ["a", "b"]


def test_row_from_record_rejects_non_finite_duration():
    for raw in ("inf", "-inf", "nan", "Infinity"):
        row = Row.from_record({"Task": "web", "Remark": "x", "Duration (hour)": raw})
        assert row.duration == 0.0
