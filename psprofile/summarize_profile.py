#!/usr/bin/env python3
"""
Print usage statistics for the current profile file.
"""
import sys
from typing import Optional, Sequence

from tabulate import tabulate

from psprofile.cli.cli import load_config, parse_env_args
from psprofile.models.errors import ProfileError
from psprofile.service.store.row_store import RowStore
from psprofile.service.summary.profile_summary import ProfileSummary, summarize
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)

TOP_PROCESS_LIMIT = 10
MAX_PROCESS_WIDTH = 60


def _short(process: str) -> str:
    if len(process) <= MAX_PROCESS_WIDTH:
        return process
    return process[:MAX_PROCESS_WIDTH - 3] + "..."


def format_summary(summary: ProfileSummary) -> str:
    stats_rows = [
        [name, s.min, s.avg, s.p50, s.p95, s.p99, s.max]
        for name, s in (("cpu %", summary.cpu), ("mem %", summary.mem))
    ]
    stats_table = tabulate(
        stats_rows,
        headers=["metric", "min", "avg", "p50", "p95", "p99", "max"],
        tablefmt="github",
        floatfmt=".2f",
    )

    process_rows = [
        [_short(p.process), p.peak_cpu_percent, p.avg_cpu_percent, p.peak_mem_percent, p.samples_count]
        for p in summary.top_processes
    ]
    process_table = tabulate(
        process_rows,
        headers=["process", "peak cpu %", "avg cpu %", "peak mem %", "samples"],
        tablefmt="github",
        stralign="left",
        floatfmt=".2f",
    )

    return (
        f"Samples: {summary.samples_count}\n\n"
        f"{stats_table}\n\n"
        f"Top {len(summary.top_processes)} processes by peak CPU\n\n"
        f"{process_table}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_env_args("Summarize CPU and memory usage from the profile file", argv)
    config = load_config(args.env)

    store = RowStore(config.paths.profile_file)
    try:
        table = store.read_table()
    except (OSError, ProfileError) as e:
        logger.error(f"can't fetch data: {e}")
        return 1

    print(format_summary(summarize(table, limit=TOP_PROCESS_LIMIT)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
