"""CLI entry point for clifx."""

from __future__ import annotations

# Python version check - must be before any imports that use 3.12+ syntax.
import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: clifx requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

from clifx.cli.commands.root import cli  # noqa: E402


def main() -> None:
    """Entry point for the ``clifx`` console script."""
    cli()


if __name__ == "__main__":
    main()
