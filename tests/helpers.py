"""Shared test helpers."""

from datetime import datetime

DELIMITER = "%CPU %MEM ARGS mer."

SAMPLE_LOG = (
    "01 Jan. 2024 10:00:00 UTC\n"
    "5.0 2.0 myproc\n"
    "%CPU %MEM ARGS mer.02 Jan. 2024 11:00:00 UTC\n"
    "3.0 1.0 other proc\n"
)


def at(clock: str) -> datetime:
    """Time of day on the reference day used for all parsed timestamps."""
    return datetime.strptime(clock, "%H:%M:%S")
