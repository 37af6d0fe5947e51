"""Configuration management for devprep."""

from .parser import (
    CONFIG_FILENAME,
    ConfigError,
    DevprepConfig,
    EnvironmentConfig,
    PluginsConfig,
    RuntimeConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DevprepConfig",
    "EnvironmentConfig",
    "PluginsConfig",
    "RuntimeConfig",
    "find_config_file",
    "load_config",
]
