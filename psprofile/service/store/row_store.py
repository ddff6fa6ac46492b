"""
Profile file store.

Rows are kept in a small CSV file between the log-parsing step and the HTTP
server. The file is rewritten as a whole on every generation and read back in
full on every request.
"""
import csv
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from psprofile.consts.formats import PROFILE_HEADER, TIME_FORMAT
from psprofile.models.errors import StoreFormatError
from psprofile.models.row import Row, RowDecodeResult
from psprofile.models.table import Table
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)

# Command lines (e.g. Java classpaths) easily exceed the csv default of 128 KiB
FIELD_SIZE_LIMIT = 16 * 1024 * 1024

if csv.field_size_limit() < FIELD_SIZE_LIMIT:
    csv.field_size_limit(FIELD_SIZE_LIMIT)


class RowStore:
    """CSV-backed storage for parsed samples"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def write_rows(self, rows: Iterable[Row]) -> int:
        """
        Overwrite the profile file with the header followed by one line per row.

        Returns:
            Number of rows written
        """
        count = 0
        with open(self.path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(PROFILE_HEADER)
            for row in rows:
                writer.writerow(encode_row(row))
                count += 1
        logger.info(f"✓ Wrote {count} rows to {self.path}")
        return count

    def read_table(self) -> Table:
        """
        Read the profile file into a Table.

        Records that cannot be decoded are logged and skipped; the read only
        stops at end of file.

        Raises:
            FileNotFoundError: If the profile file does not exist
            StoreFormatError: If the header line cannot be read
        """
        table = Table()
        with open(self.path, 'r', newline='', encoding='utf-8', errors='replace') as f:
            reader = csv.reader(f)
            try:
                next(reader)
            except StopIteration:
                raise StoreFormatError(f"Missing header in profile file {self.path}") from None
            except csv.Error as e:
                logger.error(f"Error while decoding header: {e}")
                raise StoreFormatError(f"Unreadable header in profile file {self.path}: {e}") from e

            while True:
                try:
                    record = next(reader)
                except StopIteration:
                    break
                except csv.Error as e:
                    # the reader resumes on the next line
                    logger.warning(f"Error while reading line {reader.line_num}: '{e}'")
                    continue
                if not record:
                    continue
                result = decode_row(record)
                if not result.ok:
                    logger.warning(f"Error while decoding row: {record} '{result.reason}'")
                    continue
                table.append(result.row)
        return table


def encode_row(row: Row) -> List[str]:
    return [
        row.date.strftime(TIME_FORMAT),
        repr(row.cpu_percent),
        repr(row.mem_percent),
        row.process,
    ]


def decode_row(record: List[str]) -> RowDecodeResult:
    """Decode one CSV record (time, cpu, mem, proc) into a Row or a skip reason."""
    if len(record) < len(PROFILE_HEADER):
        return RowDecodeResult.skip(
            f"record not the good length: expected {len(PROFILE_HEADER)} fields, got {len(record)}"
        )

    time_str, cpu_str, mem_str, process = record[:len(PROFILE_HEADER)]
    try:
        date = datetime.strptime(time_str, TIME_FORMAT)
    except ValueError as e:
        return RowDecodeResult.skip(f"invalid time '{time_str}': {e}")
    try:
        cpu = float(cpu_str)
    except ValueError:
        return RowDecodeResult.skip(f"invalid cpu value '{cpu_str}'")
    try:
        mem = float(mem_str)
    except ValueError:
        return RowDecodeResult.skip(f"invalid mem value '{mem_str}'")

    return RowDecodeResult.success(Row(date=date, cpu_percent=cpu, mem_percent=mem, process=process))
