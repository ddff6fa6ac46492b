#!/usr/bin/env python3
"""
Shared helpers for the command-line entry points.
"""
import argparse
from typing import Optional, Sequence

from psprofile.config.config_loader import ConfigLoader
from psprofile.config.profile_config import ProfileConfig
from psprofile.util.log_config import apply_log_settings


def build_env_parser(description: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --env option.

    Args:
        description: Optional parser description shown in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with the --env argument.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    return parser


def parse_env_args(description: Optional[str] = None, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments using the common --env option.

    Args:
        description: Optional parser description shown in CLI help.
        argv: Arguments to parse (default: sys.argv[1:]).

    Returns:
        argparse.Namespace: parsed arguments containing `env`.
    """
    parser = build_env_parser(description=description)
    return parser.parse_args(argv)


def load_config(env: Optional[str] = None) -> ProfileConfig:
    """Load the bundled configuration and apply its logging settings."""
    config = ConfigLoader(env=env).config_data
    apply_log_settings(config.logging.level, config.logging.file)
    return config
