"""Tests for the ps monitor log parser."""

from pathlib import Path

import pytest

from psprofile.models.errors import LogFormatError
from psprofile.service.profile_parser.ps_log_parser import PsLogParser, parse_header
from tests.helpers import DELIMITER, SAMPLE_LOG, at


def test_parse_two_blocks():
    rows = PsLogParser(delimiter=DELIMITER).parse_text(SAMPLE_LOG)

    assert len(rows) == 2
    assert rows[0].date == at("10:00:00")
    assert rows[0].cpu_percent == pytest.approx(5.0)
    assert rows[0].mem_percent == pytest.approx(2.0)
    assert rows[0].process == "myproc"
    assert rows[1].date == at("11:00:00")
    assert rows[1].cpu_percent == pytest.approx(3.0)
    assert rows[1].mem_percent == pytest.approx(1.0)
    assert rows[1].process == "other proc"


def test_short_lines_are_dropped():
    text = (
        "01 Jan. 2024 10:00:00 UTC\n"
        "5.0 2.0 myproc\n"
        "1.0 2.0\n"
        "7.5\n"
        "\n"
        "0.1 0.2 a b c\n"
    )
    rows = PsLogParser(delimiter=DELIMITER).parse_text(text)

    assert [r.process for r in rows] == ["myproc", "a b c"]


def test_process_tokens_rejoined_with_single_spaces():
    text = "01 Jan. 2024 10:00:00 UTC\n  1.0   0.5   /usr/bin/python3    -m   http.server  \n"
    rows = PsLogParser(delimiter=DELIMITER).parse_text(text)

    assert rows[0].process == "/usr/bin/python3 -m http.server"


def test_empty_blocks_are_skipped():
    text = DELIMITER + DELIMITER + "01 Jan. 2024 10:00:00 UTC\n5.0 2.0 myproc\n" + DELIMITER + "\n  \n"
    rows = PsLogParser(delimiter=DELIMITER).parse_text(text)

    assert len(rows) == 1


def test_block_without_samples_yields_nothing():
    rows = PsLogParser(delimiter=DELIMITER).parse_text("01 Jan. 2024 10:00:00 UTC\n")

    assert rows == []


def test_non_numeric_usage_line_is_skipped():
    text = "01 Jan. 2024 10:00:00 UTC\n%CPU %MEM ARGS\n5.0 2.0 myproc\n"
    rows = PsLogParser(delimiter=DELIMITER).parse_text(text)

    assert [r.process for r in rows] == ["myproc"]


def test_bad_header_aborts_whole_parse():
    text = SAMPLE_LOG + DELIMITER + "not a date\n1.0 1.0 proc\n"

    with pytest.raises(LogFormatError) as excinfo:
        PsLogParser(delimiter=DELIMITER).parse_text(text)
    assert excinfo.value.header == "not a date"


def test_calendar_date_is_discarded():
    text = (
        "01 Jan. 2024 10:00:00 UTC\n1.0 1.0 a\n"
        + DELIMITER
        + "15 Mar. 2025 10:00:00 CET\n2.0 2.0 b\n"
    )
    rows = PsLogParser(delimiter=DELIMITER).parse_text(text)

    assert rows[0].date == rows[1].date == at("10:00:00")


def test_parse_header_accepts_zone_abbreviations():
    assert parse_header("31 Dec. 2023 23:59:58 CEST") == at("23:59:58")
    assert parse_header("01 Feb. 2024 00:00:01 +02") == at("00:00:01")


@pytest.mark.parametrize("header", [
    "01 Jan. 2024 10:00:00",
    "01 Jan 2024 10:00:00 UTC",
    "2024-01-01 10:00:00 UTC",
    "01 Jan. 2024 25:00:00 UTC",
    "",
])
def test_parse_header_rejects_malformed(header):
    with pytest.raises(LogFormatError):
        parse_header(header)


def test_custom_delimiter():
    text = "01 Jan. 2024 10:00:00 UTC\n1.0 1.0 a\n----\n01 Jan. 2024 10:00:05 UTC\n2.0 2.0 b\n"
    rows = PsLogParser(delimiter="----\n").parse_text(text)

    assert [r.date for r in rows] == [at("10:00:00"), at("10:00:05")]


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        PsLogParser(delimiter="")


def test_parse_log_reads_file(tmp_path: Path):
    log_file = tmp_path / "ps.log"
    log_file.write_text(SAMPLE_LOG, encoding="utf-8")

    rows = PsLogParser(log_path=log_file, delimiter=DELIMITER).parse_log()

    assert len(rows) == 2


def test_parse_log_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        PsLogParser(log_path=tmp_path / "missing.log").parse_log()


def test_parse_header_allows_space_runs():
    assert parse_header("01  Jan.  2024 10:00:00   UTC") == at("10:00:00")


@pytest.mark.parametrize("header", [
    "1 Jan. 2024 10:00:00 UTC",
    "01 Jan. 2024 10:00:00 utc",
    "01 Jan. 2024 10:00:00 Z",
    "01 Jan. 2024 10:00:00 UT",
    "01 Jan. 2024 10:00:00 UTCXY",
    "01 Jan. 2024 10:00:00 +2",
])
def test_parse_header_rejects_non_layout_zones_and_days(header):
    with pytest.raises(LogFormatError):
        parse_header(header)


def test_parse_log_tolerates_non_utf8_bytes(tmp_path: Path):
    log_file = tmp_path / "ps.log"
    log_file.write_bytes(b"01 Jan. 2024 10:00:00 UTC\n5.0 2.0 caf\xe9 --opt\n1.0 1.0 plain\n")

    rows = PsLogParser(log_path=log_file, delimiter=DELIMITER).parse_log()

    assert [r.process for r in rows] == ["caf\ufffd --opt", "plain"]
