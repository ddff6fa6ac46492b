#!/usr/bin/env python3
"""
Profile generation step.

Parses the raw `ps` monitor log and rewrites the profile file read by the
chart server. Run it by hand whenever the monitor log has grown.
"""
import sys
from typing import Optional, Sequence

from psprofile.cli.cli import load_config, parse_env_args
from psprofile.models.errors import ProfileError
from psprofile.service.profile_parser.ps_log_parser import PsLogParser
from psprofile.service.store.row_store import RowStore
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)


def generate(parser: PsLogParser, store: RowStore) -> int:
    """
    Parse the monitor log and write every sample to the store.

    Returns:
        Number of rows written
    """
    rows = parser.parse_log()
    return store.write_rows(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_env_args("Parse the ps monitor log into the profile file", argv)
    config = load_config(args.env)

    logger.info("=" * 60)
    logger.info("Generating profile")
    logger.info("=" * 60)

    parser = PsLogParser(log_path=config.paths.log_file, delimiter=config.block_delimiter)
    store = RowStore(config.paths.profile_file)
    try:
        count = generate(parser, store)
    except (OSError, ProfileError) as e:
        logger.error(f"Profile generation failed: {e}")
        return 1

    logger.info(f"✓ {count} samples exported to: {store.path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
