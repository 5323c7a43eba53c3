"""Configuration management for purge-deps.

Every run starts from the built-in defaults; command-line flags are applied
on top in order. ``.purge-deps.yaml`` in the working directory may only set
logging options.

Example usage:
    from purge_deps.config import ConfigBuilder, load_logging_config

    builder = ConfigBuilder(logging=load_logging_config())
    builder.extend_targets([".turbo"], "extends")
    config = builder.build()
"""

from purge_deps.config.builder import ConfigBuilder
from purge_deps.config.loader import (
    PROJECT_FILENAME,
    dict_to_logging_config,
    load_logging_config,
    load_yaml_file,
)
from purge_deps.config.schema import DEFAULT_IGNORE, DEFAULT_TARGETS, Config, LoggingConfig

__all__ = [
    "Config",
    "ConfigBuilder",
    "LoggingConfig",
    "DEFAULT_TARGETS",
    "DEFAULT_IGNORE",
    "PROJECT_FILENAME",
    "load_logging_config",
    "load_yaml_file",
    "dict_to_logging_config",
]
