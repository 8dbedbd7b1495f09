#!/usr/bin/env python3
"""Source mover CLI - Main Entry Point."""

import argparse
import sys
from typing import Optional

from . import config
from .adapters import (
    ConsoleProfiler,
    FileConsole,
    GithubApi,
    GitHubApiTransportAdapter,
    StdoutConsole
)
from .exceptions import RepoError, ValidationError
from .handlers import COMMAND_HANDLERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="source-mover", description="Copybara source mover GitHub helper"
    )
    parser.add_argument("--log-file", default=config.LOG_FILE)
    parser.add_argument(
        "--flush-rate", default=config.FLUSH_RATE,
        help="lines buffered before writing the log file (0 = on exit)"
    )
    parser.add_argument("--api-url", default=config.GITHUB_API_URL)
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    pulls = sub.add_parser("pulls", help="List pull requests")
    pulls.add_argument("project", help="owner/repo")

    pull = sub.add_parser("pull", help="Show a pull request")
    pull.add_argument("project", help="owner/repo")
    pull.add_argument("number", type=int)

    labels = sub.add_parser("labels", help="Show pull request labels")
    labels.add_argument("project", help="owner/repo")
    labels.add_argument("number", type=int)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI initialization."""
    args = build_parser().parse_args(argv)

    try:
        flush_rate = int(args.flush_rate)
    except ValueError:
        print(
            f"ERROR: invalid flush rate '{args.flush_rate}'", file=sys.stderr
        )
        return 1

    if flush_rate < 0:
        print("ERROR: --flush-rate must be >= 0", file=sys.stderr)
        return 1

    try:
        with FileConsole(
            StdoutConsole(verbose=args.verbose), args.log_file, flush_rate
        ) as console:
            console.startup_message(config.VERSION)
            api = GithubApi(
                GitHubApiTransportAdapter(args.api_url),
                ConsoleProfiler(console)
            )
            handler = COMMAND_HANDLERS[args.command](api, console)
            handler.handle(args.project, getattr(args, "number", None))
    except (RepoError, ValidationError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
