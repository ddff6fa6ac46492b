from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class PathsConfig:
    log_file: Path = Path("./ps.log")
    profile_file: Path = Path("profile.csv")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[Path] = None


class ProfileConfig:
    server: ServerConfig
    paths: PathsConfig
    block_delimiter: str
    logging: LoggingConfig
