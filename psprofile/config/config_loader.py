"""
Configuration loader for the profile viewer.

This module provides the ConfigLoader class for loading and validating the
viewer configuration from YAML files.
"""
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from psprofile.config.profile_config import LoggingConfig, PathsConfig, ProfileConfig, ServerConfig
from psprofile.consts.formats import DEFAULT_BLOCK_DELIMITER

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, file_name: str) -> Dict[str, Any]:
        with open(self.config_path / file_name, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_name} must contain a mapping at the top level")
        return data

    def _load_config(self) -> ProfileConfig:
        """
        Load and parse configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            ProfileConfig: Configured viewer configuration instance
        """
        data = self._read_yaml("config.yaml")

        if self.env:
            env_data = self._read_yaml(f"config_{self.env}.yaml")
            # Merge section by section; keys missing from the override keep their base value
            for section, values in env_data.items():
                if isinstance(values, dict) and isinstance(data.get(section), dict):
                    data[section].update(values)
                else:
                    data[section] = values

        server = data.get("server") or {}
        paths = data.get("paths") or {}
        parser = data.get("parser") or {}
        logging_section = data.get("logging") or {}

        config = ProfileConfig()

        config.server = ServerConfig(
            host=str(server.get("host", ServerConfig.host)),
            port=int(server.get("port", ServerConfig.port)),
        )
        config.paths = PathsConfig(
            log_file=Path(paths.get("log_file", PathsConfig.log_file)),
            profile_file=Path(paths.get("profile_file", PathsConfig.profile_file)),
        )

        config.block_delimiter = parser.get("block_delimiter", DEFAULT_BLOCK_DELIMITER)
        if not config.block_delimiter:
            raise ValueError("parser.block_delimiter must not be empty")

        log_file = logging_section.get("file")
        config.logging = LoggingConfig(
            level=str(logging_section.get("level", LoggingConfig.level)),
            file=Path(log_file) if log_file else None,
        )

        return config


if __name__ == "__main__":

    # python3 -m psprofile.config.config_loader

    config = ConfigLoader(env="dev").config_data
    print(config.server, config.paths, config.logging, repr(config.block_delimiter))
