import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from psprofile.consts.formats import DEFAULT_BLOCK_DELIMITER, HEADER_DATE_FORMAT
from psprofile.models.errors import LogFormatError
from psprofile.models.row import Row
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)

# "02 Jan. 2006 15:04:05 MST": two-digit day, runs of spaces between fields,
# zone abbreviation ("UTC", "CEST") or numeric offset ("+02", "-0530")
HEADER_PATTERN = re.compile(
    r'^(?P<stamp>\d{2} +[A-Za-z]{3}\. +\d{4} +\d{1,2}:\d{2}:\d{2}) +(?P<zone>[A-Z]{3,4}|[+-]\d{2}(?:\d{2})?)$'
)

MIN_SAMPLE_FIELDS = 3


class PsLogParser:
    """Parser for monitor logs made of repeated `ps -o %cpu,%mem,args` snapshots.

    Each snapshot (block) is separated from the next by a fixed delimiter and
    starts with a `date` header line, e.g.::

        01 Jan. 2024 10:00:00 UTC
        5.0 2.0 /usr/bin/python3 app.py
        0.3 1.1 sshd: user@pts/0
    """

    def __init__(self, log_path: Optional[Path] = None, delimiter: str = DEFAULT_BLOCK_DELIMITER):
        if not delimiter:
            raise ValueError("Block delimiter must not be empty")
        self.log_path = log_path
        self.delimiter = delimiter

    def parse_log(self) -> List[Row]:
        """Read the monitor log from disk and parse every block."""
        if self.log_path is None:
            raise ValueError("No log path configured")
        if not self.log_path.exists():
            raise FileNotFoundError(f"Log file {self.log_path} does not exist.")

        # Command lines are free text and may carry bytes from any locale
        text = self.log_path.read_text(encoding='utf-8', errors='replace')
        rows = self.parse_text(text)
        logger.info(f"Parsed {len(rows)} samples from {self.log_path.name}")
        return rows

    def parse_text(self, text: str) -> List[Row]:
        """
        Parse raw log text into rows, in log order.

        Raises:
            LogFormatError: If any block header is not a valid date. Nothing is
                returned in that case, even for blocks parsed before it.
        """
        rows: List[Row] = []
        for block in text.split(self.delimiter):
            if not block.strip():
                continue
            rows.extend(self._parse_block(block))
        return rows

    def _parse_block(self, block: str) -> List[Row]:
        lines = block.split('\n')
        header = lines[0].strip()
        try:
            date = parse_header(header)
        except LogFormatError:
            logger.error(f"block = '{block}'")
            logger.error(f"header = '{header}'")
            raise

        rows = []
        for line in lines[1:]:
            fields = line.split()
            if len(fields) < MIN_SAMPLE_FIELDS:
                continue
            try:
                cpu = float(fields[0])
                mem = float(fields[1])
            except ValueError:
                logger.debug(f"Skipping sample with non-numeric usage: '{line.strip()}'")
                continue
            rows.append(Row(
                date=date,
                cpu_percent=cpu,
                mem_percent=mem,
                process=' '.join(fields[2:])
            ))
        return rows


def parse_header(header: str) -> datetime:
    """
    Parse a block header such as "01 Jan. 2024 10:00:00 UTC".

    Only the time of day is kept: the result sits on the strptime reference
    day, so samples from different calendar days share the same timestamp.
    """
    match = HEADER_PATTERN.match(header)
    if not match:
        raise LogFormatError(header, f"expected '{HEADER_DATE_FORMAT} ZONE'")
    stamp_str = re.sub(r' +', ' ', match.group('stamp'))
    try:
        stamp = datetime.strptime(stamp_str, HEADER_DATE_FORMAT)
    except ValueError as e:
        raise LogFormatError(header, str(e)) from e
    return datetime(1900, 1, 1, stamp.hour, stamp.minute, stamp.second)
