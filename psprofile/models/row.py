from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Row:
    """Single process sample taken from one `ps` snapshot"""
    date: datetime  # time of day only, on the strptime reference day (1900-01-01)
    cpu_percent: float
    mem_percent: float
    process: str  # full command line


@dataclass
class RowDecodeResult:
    """Outcome of decoding one stored record: either a row or a skip reason"""
    row: Optional[Row] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.row is not None

    @classmethod
    def success(cls, row: Row) -> "RowDecodeResult":
        return cls(row=row)

    @classmethod
    def skip(cls, reason: str) -> "RowDecodeResult":
        return cls(reason=reason)
