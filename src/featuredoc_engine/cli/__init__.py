"""Command-line entry point for featuredoc.

Usage:
    featuredoc [days]

Regenerates the feature sections of the project README from the
feature manifest. ``days`` sets the near-term window (default 60, or
FEATUREDOC_WINDOW_DAYS).
"""

import argparse
import sys

from featuredoc_engine.cli.readme import cmd_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featuredoc",
        description="Regenerate README feature sections from the feature manifest",
    )
    parser.add_argument(
        "days", nargs="?", type=int, default=None,
        help="Near-term window in days (default 60)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return cmd_sync(args)


if __name__ == "__main__":
    sys.exit(main())
