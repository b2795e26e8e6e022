"""Gridpack runtime configuration and logging."""

from gridpack.runtime.config import GridpackConfig, get_config, initialize_config, load_config, set_config
from gridpack.runtime.logging import LoggingConfig, configure_logging, setup_logging

__all__ = [
    "GridpackConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "initialize_config",
    "load_config",
    "set_config",
    "setup_logging",
]
