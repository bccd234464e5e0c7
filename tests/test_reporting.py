import csv
import logging
from pathlib import Path

from photo_sorter.models import CapturedTimestamp, FileOutcome, RunSummary
from photo_sorter.reporting import SummaryReporter


def make_summary():
    summary = RunSummary()
    summary.add(FileOutcome(Path("/src/b.jpg"), CapturedTimestamp(2023, 5, 10, 14, 30, 0),
                            Path("/dest/2023/5/10/2023_5_10_14_30_0.jpg")))
    summary.add(FileOutcome(Path("/src/a.txt"), None, Path("/dest/other/a.txt")))
    summary.add(FileOutcome(Path("/src/c.jpg"), error="disk full"))
    return summary


def test_summary_counts():
    summary = make_summary()
    assert summary.total == 3
    assert summary.classified == 1
    assert summary.unclassified == 1
    assert summary.succeeded == 2
    assert [o.source.name for o in summary.failures] == ["c.jpg"]
    assert not summary.ok


def test_log_summary_lists_failures(caplog):
    with caplog.at_level(logging.INFO):
        SummaryReporter().log_summary(make_summary())

    assert "3 files: 1 classified, 1 unclassified, 1 failed" in caplog.text
    assert "c.jpg: disk full" in caplog.text


def test_write_csv(tmp_path):
    out = tmp_path / "report.csv"
    SummaryReporter().write_csv(make_summary(), out)

    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert rows[0] == SummaryReporter.HEADERS
    assert [r[1] for r in rows[1:]] == ["unclassified", "classified", "failed"]
    assert rows[2][3] == "2023-5-10 14:30:0"
    assert rows[3][4] == "disk full"
