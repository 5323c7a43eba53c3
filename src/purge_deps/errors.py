"""Exception types raised by purge-deps."""

from __future__ import annotations

from pathlib import Path


class PurgeError(Exception):
    """Base class for all purge-deps errors."""

    pass


class UsageError(PurgeError):
    """Malformed or conflicting command-line arguments.

    Raised when:
    - An unknown option is given
    - Mutually exclusive target flags are combined
    - An option value cannot be interpreted
    """

    pass


class MissingArgumentError(UsageError):
    """A value-taking option was the last token on the command line."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"You must specify a value after '{option}'.")


class FileSystemError(PurgeError):
    """Listing a directory or deleting an entry failed.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, action: str, path: Path, error: OSError) -> None:
        self.action = action
        self.path = path
        self.error = error
        super().__init__(f"{action.capitalize()} {path} failed: {error}")
