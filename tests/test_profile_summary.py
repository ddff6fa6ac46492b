"""Tests for profile statistics and the summary command output."""

import pytest

from psprofile.models.row import Row
from psprofile.models.table import Table
from psprofile.service.summary.profile_summary import calculate_stat_summary, summarize, top_processes
from psprofile.summarize_profile import format_summary
from tests.helpers import at


def _table(samples):
    table = Table()
    for clock, cpu, mem, proc in samples:
        table.append(Row(date=at(clock), cpu_percent=cpu, mem_percent=mem, process=proc))
    return table


@pytest.fixture
def table():
    return _table([
        ("10:00:00", 10.0, 1.0, "db"),
        ("10:00:00", 90.0, 5.0, "java -jar app.jar"),
        ("10:00:05", 30.0, 2.0, "db"),
        ("10:00:05", 50.0, 6.0, "java -jar app.jar"),
        ("10:00:05", 1.0, 0.1, "sshd"),
    ])


def test_stat_summary():
    stats = calculate_stat_summary([3.0, 1.0, 2.0, 4.0])

    assert stats.min == 1.0
    assert stats.max == 4.0
    assert stats.p50 == 3.0
    assert stats.avg == pytest.approx(2.5)


def test_stat_summary_empty():
    stats = calculate_stat_summary([])

    assert (stats.min, stats.max, stats.avg) == (0, 0, 0)


def test_top_processes_ranked_by_peak_cpu(table):
    ranked = top_processes(table)

    assert [p.process for p in ranked] == ["java -jar app.jar", "db", "sshd"]
    java = ranked[0]
    assert java.peak_cpu_percent == pytest.approx(90.0)
    assert java.avg_cpu_percent == pytest.approx(70.0)
    assert java.peak_mem_percent == pytest.approx(6.0)
    assert java.samples_count == 2


def test_top_processes_limit(table):
    assert len(top_processes(table, limit=1)) == 1


def test_summarize(table):
    summary = summarize(table)

    assert summary.samples_count == 5
    assert summary.cpu.max == pytest.approx(90.0)
    assert summary.mem.min == pytest.approx(0.1)
    assert summary.to_dict()["top_processes"][0]["process"] == "java -jar app.jar"


def test_summarize_empty_table():
    summary = summarize(Table())

    assert summary.samples_count == 0
    assert summary.top_processes == []


def test_table_to_frame(table):
    df = table.to_frame()

    assert list(df.columns) == ["time", "cpu", "mem", "proc"]
    assert df["time"].tolist()[:2] == ["10:00:00", "10:00:00"]
    assert df["cpu"].sum() == pytest.approx(181.0)


def test_format_summary(table):
    text = format_summary(summarize(table))

    assert "Samples: 5" in text
    assert "java -jar app.jar" in text
    assert "90.00" in text
