"""purge-deps: remove dependency folders and lock files from a project tree."""

__version__ = "0.1.0"

# Public API
from purge_deps.config import Config, ConfigBuilder, LoggingConfig
from purge_deps.deleter import PurgeResult, purge
from purge_deps.errors import FileSystemError, MissingArgumentError, PurgeError, UsageError
from purge_deps.ignorefile import load_ignore_file

__all__ = [
    # Config
    "Config",
    "ConfigBuilder",
    "LoggingConfig",
    # Walk
    "PurgeResult",
    "purge",
    "load_ignore_file",
    # Errors
    "PurgeError",
    "UsageError",
    "MissingArgumentError",
    "FileSystemError",
]
