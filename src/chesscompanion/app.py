"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from chesscompanion.config import load_settings, save_settings
from chesscompanion.oracle import ORACLE_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-companion",
        description="Play against a human opponent with move suggestions from an AI oracle.",
    )
    parser.add_argument("--oracle", choices=ORACLE_NAMES, help="suggestion service")
    parser.add_argument("--strength", type=int, help="search depth, 1-15")
    parser.add_argument("--language", choices=("English", "Russian"))
    parser.add_argument(
        "--save",
        action="store_true",
        help="remember the given options for later sessions",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch Chess Companion."""
    from chesscompanion.ui.bootstrap import run_application

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    overrides = {
        key: value
        for key, value in (
            ("oracle", args.oracle),
            ("strength", args.strength),
            ("language", args.language),
        )
        if value is not None
    }
    settings = replace(settings, **overrides).clamped()
    if args.save:
        save_settings(settings)

    sys.exit(run_application(settings))


if __name__ == "__main__":
    main()
