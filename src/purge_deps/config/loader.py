"""Loading of the project's ``.purge-deps.yaml``.

The file only carries the ``logging`` section. Targets and the ignore list
always come from the built-in defaults and the command line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from purge_deps.config.schema import LoggingConfig

_log = logging.getLogger("purge_deps.config")

PROJECT_FILENAME = ".purge-deps.yaml"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found or invalid."""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except yaml.YAMLError as e:
        _log.warning("Invalid YAML in %s: %s", path, e)
        return {}
    except OSError as e:
        _log.warning("Cannot read %s: %s", path, e)
        return {}


def dict_to_logging_config(data: dict[str, Any]) -> LoggingConfig:
    """Pick the ``logging`` section out of a parsed config file.

    Values of the wrong type are dropped. Any other top-level key is
    reported and has no effect.
    """
    for key in data:
        if key != "logging":
            _log.warning("Ignoring unsupported config key %r", key)

    section = data.get("logging")
    if not isinstance(section, dict):
        return LoggingConfig()

    verbose = section.get("verbose")
    log_file = section.get("file")
    return LoggingConfig(
        verbose=verbose if isinstance(verbose, int) and not isinstance(verbose, bool) else None,
        file=log_file if isinstance(log_file, str) else None,
    )


def load_logging_config(cwd: Path | None = None) -> LoggingConfig:
    """Read logging settings from ``.purge-deps.yaml`` in ``cwd``.

    Args:
        cwd: Directory holding the file. Defaults to the working directory.
    """
    path = (cwd or Path.cwd()) / PROJECT_FILENAME
    data = load_yaml_file(path)
    if data:
        _log.debug("Loaded config from %s", path)
    return dict_to_logging_config(data)
