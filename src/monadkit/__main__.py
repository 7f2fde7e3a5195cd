"""Demo runner.

Examples:
- python -m monadkit               # run every demo
- python -m monadkit lazy stream   # run selected demos
- python -m monadkit --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from monadkit.config import Config
from monadkit.demos import DEMOS, run_demos
from monadkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m monadkit",
        description="Run the Attempt, Lazy and LazyStream demos.",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help="Demos to run (default: all). See --list.",
    )
    parser.add_argument(
        "--list", action="store_true", help="List available demos and exit"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        width = max(len(name) for name in DEMOS)
        for demo in DEMOS.values():
            print(f"{demo.name:<{width}}  {demo.description}")
        return 0

    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(
            f"unknown demo(s): {', '.join(unknown)} (choose from {', '.join(DEMOS)})"
        )

    try:
        config = Config.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"Hint: {exc.hint}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.logging_level, format="%(levelname)s %(name)s: %(message)s"
    )
    run_demos(list(args.demos) or list(DEMOS), config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
