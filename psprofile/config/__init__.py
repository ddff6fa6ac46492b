"""Configuration module for the profile viewer."""

from .config_loader import ConfigLoader
from .profile_config import LoggingConfig, PathsConfig, ProfileConfig, ServerConfig

__all__ = ["ConfigLoader", "LoggingConfig", "PathsConfig", "ProfileConfig", "ServerConfig"]
