"""Diagnostic logging for purge-deps.

User-facing output (deleted paths, errors, the summary) goes through rich
consoles. This logger only carries diagnostics: which directories are
scanned, which entries are skipped and why.

Verbosity, from ``-v`` or ``logging.verbose`` in ``.purge-deps.yaml``:
    0 = error, 1 = warning, 2 = info (default), 3 = debug

Records go to ``logging.file`` when set, otherwise to stderr when it is a
terminal, otherwise nowhere.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from purge_deps.config.schema import LoggingConfig

logger = logging.getLogger("purge_deps")

VERBOSITY_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)
MAX_VERBOSITY = len(VERBOSITY_LEVELS) - 1
DEFAULT_VERBOSITY = 2

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def level_for(verbose: int | None) -> int:
    """Map a verbosity number to a log level, clamping out-of-range values."""
    if verbose is None:
        verbose = DEFAULT_VERBOSITY
    return VERBOSITY_LEVELS[max(0, min(verbose, MAX_VERBOSITY))]


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Install the handler for this run, replacing any earlier one."""
    reset_logging()
    level = level_for(config.verbose if config else None)
    logger.setLevel(level)

    handler: logging.Handler | None = None
    open_error: OSError | None = None
    if config and config.file:
        log_path = os.path.expanduser(config.file)
        try:
            handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        except OSError as e:
            open_error = e
    if handler is None and (open_error is not None or sys.stderr.isatty()):
        handler = logging.StreamHandler(sys.stderr)
    if handler is None:
        return

    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    if open_error is not None:
        logger.warning("Cannot open log file %s: %s", config.file, open_error)


def reset_logging() -> None:
    """Remove and close installed handlers."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the purge_deps logger, or a child such as ``purge_deps.walk``."""
    if name:
        return logger.getChild(name)
    return logger
