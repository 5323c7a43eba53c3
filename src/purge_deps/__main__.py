"""CLI entry point for purge-deps."""

import sys


def main() -> int:
    """Main entry point for purge-deps CLI."""
    from purge_deps.cli import run_cli

    return run_cli(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
