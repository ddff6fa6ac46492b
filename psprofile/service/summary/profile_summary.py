import dataclasses
from typing import Any, Dict, List

from psprofile.models.table import Table


@dataclasses.dataclass
class StatSummary:
    """Statistical summary of a list of numeric values"""
    min: float
    max: float
    p50: float
    p95: float
    p99: float
    avg: float


@dataclasses.dataclass
class ProcessUsage:
    """Usage of one command line across all snapshots"""
    process: str
    peak_cpu_percent: float
    avg_cpu_percent: float
    peak_mem_percent: float
    samples_count: int


@dataclasses.dataclass
class ProfileSummary:
    samples_count: int
    cpu: StatSummary
    mem: StatSummary
    top_processes: List[ProcessUsage]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return dataclasses.asdict(self)


def calculate_stat_summary(values: List[float]) -> StatSummary:
    """Calculate statistical summary from a list of numeric values"""
    if not values:
        return StatSummary(min=0, max=0, p50=0, p95=0, p99=0, avg=0)

    sorted_values = sorted(values)
    n = len(sorted_values)

    return StatSummary(
        min=sorted_values[0],
        max=sorted_values[-1],
        p50=sorted_values[int(n * 0.50)],
        p95=sorted_values[int(n * 0.95)] if n > 1 else sorted_values[0],
        p99=sorted_values[int(n * 0.99)] if n > 1 else sorted_values[0],
        avg=sum(sorted_values) / n
    )


def top_processes(table: Table, limit: int = 10) -> List[ProcessUsage]:
    """Rank command lines by peak CPU, highest first."""
    if len(table) == 0:
        return []

    df = table.to_frame()
    grouped = (
        df.groupby("proc", sort=False)
        .agg(
            peak_cpu=("cpu", "max"),
            avg_cpu=("cpu", "mean"),
            peak_mem=("mem", "max"),
            samples=("cpu", "size"),
        )
        .sort_values(["peak_cpu", "samples"], ascending=[False, False], kind="stable")
        .head(limit)
    )

    return [
        ProcessUsage(
            process=str(proc),
            peak_cpu_percent=float(stats.peak_cpu),
            avg_cpu_percent=float(stats.avg_cpu),
            peak_mem_percent=float(stats.peak_mem),
            samples_count=int(stats.samples),
        )
        for proc, stats in grouped.iterrows()
    ]


def summarize(table: Table, limit: int = 10) -> ProfileSummary:
    return ProfileSummary(
        samples_count=len(table),
        cpu=calculate_stat_summary(table.cpu_percent),
        mem=calculate_stat_summary(table.mem_percent),
        top_processes=top_processes(table, limit=limit),
    )
