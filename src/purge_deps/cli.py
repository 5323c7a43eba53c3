"""Command-line interface for purge-deps.

Options are bare keywords with short aliases (``path``/``-p``), processed
strictly left to right, so they are parsed by hand instead of argparse.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from purge_deps import __version__
from purge_deps.config import Config, ConfigBuilder, load_logging_config
from purge_deps.deleter import PurgeResult, purge
from purge_deps.errors import FileSystemError, MissingArgumentError, UsageError
from purge_deps.ignorefile import GITIGNORE, load_ignore_file
from purge_deps.logging import MAX_VERBOSITY, get_logger, setup_logging

log = get_logger("cli")

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

PROG = "purge-deps"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

SUMMARY_LIMIT = 10


def split_list(raw: str) -> list[str]:
    """Split a comma-separated value, trimming and dropping empty pieces.

    >>> split_list(" a, b ,,c ")
    ['a', 'b', 'c']
    """
    return [piece.strip() for piece in raw.split(",") if piece.strip()]


def _set_path(builder: ConfigBuilder, value: str, option: str) -> None:
    builder.root = Path(value)


def _set_targets(builder: ConfigBuilder, value: str, option: str) -> None:
    builder.replace_targets(split_list(value), option)


def _extend_targets(builder: ConfigBuilder, value: str, option: str) -> None:
    builder.extend_targets(split_list(value), option)


def _set_ignore(builder: ConfigBuilder, value: str, option: str) -> None:
    builder.replace_ignore(split_list(value))


def _set_gitignore(builder: ConfigBuilder, value: str, option: str) -> None:
    builder.use_gitignore = value.lower() != "false"


def _set_verbose(builder: ConfigBuilder, value: str, option: str) -> None:
    try:
        level = int(value)
    except ValueError:
        level = None
    if level is None or not 0 <= level <= MAX_VERBOSITY:
        raise UsageError(
            f"'{option}' expects a number from 0 to {MAX_VERBOSITY}, got {value!r}."
        )
    builder.logging = replace(builder.logging, verbose=level)


# Options that take exactly one following value
_VALUE_OPTIONS: dict[str, Callable[[ConfigBuilder, str, str], None]] = {
    "path": _set_path,
    "targets": _set_targets,
    "extends": _extend_targets,
    "overwrite": _set_targets,
    "ignore": _set_ignore,
    "gitignore": _set_gitignore,
    "verbose": _set_verbose,
}

ALIASES: dict[str, str] = {
    "help": "help",
    "-h": "help",
    "version": "version",
    "-V": "version",
    "path": "path",
    "-p": "path",
    "targets": "targets",
    "-t": "targets",
    "extends": "extends",
    "-e": "extends",
    "overwrite": "overwrite",
    "-o": "overwrite",
    "ignore": "ignore",
    "-i": "ignore",
    "gitignore": "gitignore",
    "-gi": "gitignore",
    "verbose": "verbose",
    "-v": "verbose",
}

_HELP_ROWS = [
    ("-h or help", "Show this help message."),
    ("-V or version", "Show the program version."),
    ("-p or path <path>", "Directory to clean (default: current directory)."),
    ("-t or targets <names>", "Replace the targets to delete."),
    ("-o or overwrite <names>", "Replace the targets to delete."),
    ("-e or extends <names>", "Add to the targets to delete."),
    ("-i or ignore <names>", "Replace the folders to ignore."),
    ("-gi or gitignore <true|false>", "Enable or disable reading from .gitignore."),
    ("-v or verbose <0-3>", "Log verbosity: error, warning, info, debug."),
]


def print_help() -> None:
    """Print usage text."""
    console.print(escape(f"Usage: {PROG} [options]"))
    table = Table(title="Options", title_justify="left", show_header=False, box=None)
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Description")
    for option, description in _HELP_ROWS:
        table.add_row(escape(option), description)
    console.print(table)
    console.print("Names are comma-separated, e.g. -e .turbo,.next")


def parse_args(
    argv: Sequence[str], builder: ConfigBuilder | None = None
) -> ConfigBuilder | None:
    """Apply command-line flags to ``builder`` in order.

    Returns:
        The builder, or None when help or version was printed.

    Raises:
        UsageError: Unknown option or conflicting target flags.
        MissingArgumentError: A value-taking option was the last token.
    """
    builder = builder or ConfigBuilder()
    i = 0
    while i < len(argv):
        token = argv[i]
        option = ALIASES.get(token)
        if option is None:
            raise UsageError(
                f"Unknown option {token}. Use help or -h for usage information."
            )
        if option == "help":
            print_help()
            return None
        if option == "version":
            console.print(f"{PROG} {__version__}")
            return None

        if i + 1 >= len(argv):
            raise MissingArgumentError(option)
        _VALUE_OPTIONS[option](builder, argv[i + 1], option)
        i += 2

    return builder


def resolve(builder: ConfigBuilder, gitignore: Path = GITIGNORE) -> Config:
    """Fold the ignore file into the ignore list if enabled, then freeze."""
    if builder.use_gitignore:
        names = load_ignore_file(gitignore, builder.targets)
        if names is None:
            console.print(f"{escape(str(gitignore))} file not found")
        else:
            builder.add_ignore(names)
    return builder.build()


def parse(
    argv: Sequence[str],
    builder: ConfigBuilder | None = None,
    gitignore: Path = GITIGNORE,
) -> Config | None:
    """Turn command-line arguments into a Config (None for help/version)."""
    parsed = parse_args(argv, builder)
    if parsed is None:
        return None
    return resolve(parsed, gitignore)


def print_config(config: Config) -> None:
    console.print(f"Path: {escape(str(config.root))}")
    console.print(f"Targets: {escape(str(list(config.targets)))}")
    console.print(f"Ignore: {escape(str(list(config.ignore)))}")
    console.print(f"Use gitignore: {config.use_gitignore}")


def print_summary(result: PurgeResult) -> None:
    removed = result.removed
    if removed:
        console.print(f"Removed {len(removed)} items:")
        for p in removed[:SUMMARY_LIMIT]:
            console.print(f"  {escape(str(p))}")
        if len(removed) > SUMMARY_LIMIT:
            console.print(f"  ... and {len(removed) - SUMMARY_LIMIT} more")
    else:
        console.print("Nothing to clean.")
    if result.skipped:
        err_console.print(f"Skipped {len(result.skipped)} entries with undecodable names")


def run_cli(args: Sequence[str]) -> int:
    """Run the CLI with the given arguments and return the exit code."""
    try:
        builder = parse_args(args, ConfigBuilder(logging=load_logging_config()))
    except UsageError as e:
        err_console.print(f"Error: {escape(str(e))}")
        return EXIT_USAGE
    if builder is None:
        return EXIT_OK

    setup_logging(builder.logging)

    try:
        config = resolve(builder)
        print_config(config)
        result = purge(config)
    except FileSystemError as e:
        log.debug("Aborted after %s", e.path, exc_info=e)
        err_console.print(f"Error: {escape(str(e))}")
        return EXIT_FAILURE

    print_summary(result)
    return EXIT_OK
