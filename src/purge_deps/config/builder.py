"""Incremental construction of a Config while flags are processed."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from purge_deps.config.schema import DEFAULT_IGNORE, DEFAULT_TARGETS, Config, LoggingConfig
from purge_deps.errors import UsageError


@dataclass
class ConfigBuilder:
    """Mutable staging area for a Config, seeded with the defaults.

    Flags are applied in command-line order. The replace/append exclusivity
    check fires when the second flag is seen, before anything is changed.
    """

    root: Path = Path(".")
    targets: list[str] = field(default_factory=lambda: list(DEFAULT_TARGETS))
    ignore: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE))
    use_gitignore: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    _replaced_by: str | None = field(default=None, init=False, repr=False)
    _extended: bool = field(default=False, init=False, repr=False)

    def replace_targets(self, names: list[str], option: str) -> None:
        if self._extended:
            raise UsageError(f"'{option}' cannot be used with 'extends'.")
        self.targets = list(names)
        self._replaced_by = option

    def extend_targets(self, names: list[str], option: str) -> None:
        if self._replaced_by is not None:
            raise UsageError(f"'{option}' cannot be used with '{self._replaced_by}'.")
        self.targets.extend(names)
        self._extended = True

    def replace_ignore(self, names: list[str]) -> None:
        self.ignore = list(names)

    def add_ignore(self, names: list[str]) -> None:
        self.ignore.extend(names)

    def build(self) -> Config:
        return Config(
            root=self.root,
            targets=tuple(self.targets),
            ignore=tuple(self.ignore),
            use_gitignore=self.use_gitignore,
            logging=self.logging,
        )
