"""Command-line entry point for inspecting resolved settings."""

import argparse
import json
import sys

from rtx_settings.config import get_settings
from rtx_settings.config.display import format_settings, to_index_map
from rtx_settings.observability.logging import LoggingEnv, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtx-settings",
        description="Inspect the effective rtx settings",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: RTX_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print resolved settings")
    show.add_argument("--json", action="store_true", help="Print as a JSON object")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_env = LoggingEnv()
    setup_logging(level=args.log_level or log_env.level, format=log_env.format)

    settings = get_settings()
    if args.json:
        print(json.dumps(to_index_map(settings), indent=2))
    else:
        print(format_settings(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
