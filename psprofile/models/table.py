from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List

import pandas as pd

from psprofile.consts.formats import PROFILE_HEADER, TIME_FORMAT
from psprofile.models.row import Row


@dataclass
class Table:
    """Column-oriented samples; index i across the four lists is one Row"""
    date: List[datetime] = field(default_factory=list)
    cpu_percent: List[float] = field(default_factory=list)
    mem_percent: List[float] = field(default_factory=list)
    process: List[str] = field(default_factory=list)

    def append(self, row: Row) -> None:
        self.date.append(row.date)
        self.cpu_percent.append(row.cpu_percent)
        self.mem_percent.append(row.mem_percent)
        self.process.append(row.process)

    def __len__(self) -> int:
        return len(self.date)

    def rows(self) -> Iterator[Row]:
        for date, cpu, mem, process in zip(self.date, self.cpu_percent, self.mem_percent, self.process):
            yield Row(date=date, cpu_percent=cpu, mem_percent=mem, process=process)

    def to_frame(self) -> pd.DataFrame:
        """Convert to a DataFrame using the profile file column names"""
        time_col, cpu_col, mem_col, proc_col = PROFILE_HEADER
        return pd.DataFrame({
            time_col: [d.strftime(TIME_FORMAT) for d in self.date],
            cpu_col: pd.Series(self.cpu_percent, dtype="float64"),
            mem_col: pd.Series(self.mem_percent, dtype="float64"),
            proc_col: pd.Series(self.process, dtype="object"),
        })
