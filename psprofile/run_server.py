#!/usr/bin/env python3
"""
Chart server.

Serves the chart page and the `/data` endpoint built from the profile file.
The profile file itself is produced separately by psprofile-generate.
"""
from typing import Optional, Sequence

from psprofile.cli.cli import load_config, parse_env_args
from psprofile.server.app import create_app
from psprofile.service.store.row_store import RowStore
from psprofile.util.log_config import setup_logger

logger = setup_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_env_args("Serve the process CPU usage chart", argv)
    config = load_config(args.env)

    store = RowStore(config.paths.profile_file)
    app = create_app(store)

    logger.info(f"Starting server on http://localhost:{config.server.port}")
    logger.info(f"Reading samples from {store.path.resolve()}")
    app.run(host=config.server.host, port=config.server.port, threaded=True)


if __name__ == "__main__":
    main()
