"""Configuration schema dataclasses for purge-deps.

Config is the resolved, immutable value handed to the walk. Every run
starts from DEFAULT_TARGETS and DEFAULT_IGNORE; only command-line flags
and the ignore file change them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TARGETS: tuple[str, ...] = (
    "node_modules",
    "pnpm-lock.yaml",
    "yarn.lock",
    "package-lock.json",
)

DEFAULT_IGNORE: tuple[str, ...] = (
    ".changeset",
    ".husky",
    ".git",
    ".github",
    "src",
)


@dataclass
class LoggingConfig:
    """Logging configuration.

    Example .purge-deps.yaml:
        logging:
          verbose: 3
          file: ~/purge-deps.log
    """

    verbose: int | None = None  # 0-3, see purge_deps.logging
    file: str | None = None  # Log file path


@dataclass(frozen=True)
class Config:
    """Resolved configuration for one run. Read-only once built."""

    root: Path = Path(".")
    targets: tuple[str, ...] = DEFAULT_TARGETS
    ignore: tuple[str, ...] = DEFAULT_IGNORE
    use_gitignore: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore

    def is_target(self, name: str) -> bool:
        return name in self.targets
