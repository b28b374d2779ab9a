"""Command-line interface for sqrl.

Usage::

    sqrl format --placeholder dollar "DELETE FROM t WHERE a = ? AND b = ?"
    sqrl format --config sqrl.toml "DELETE FROM t WHERE a = ?"
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqrl",
        description="sqrl CLI — tools for working with SQL statements.",
    )
    sub = parser.add_subparsers(dest="command")

    fmt = sub.add_parser(
        "format",
        help="Rewrite '?' placeholders into a dialect's syntax.",
    )
    source = fmt.add_mutually_exclusive_group()
    source.add_argument(
        "--placeholder",
        default="question",
        help="Placeholder format: question, dollar, colon, atp (default: question).",
    )
    source.add_argument(
        "--config",
        help="Read the placeholder format from a .json/.toml/.yaml file.",
    )
    fmt.add_argument("sql", help="SQL text with '?' placeholders.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "format":
        return _cmd_format(args)

    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    from .config import statement_from_config
    from .placeholder import placeholder_format

    try:
        if args.config:
            fmt = statement_from_config(args.config).placeholder
        else:
            fmt = placeholder_format(args.placeholder)
    except (OSError, ValueError, ImportError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(fmt.replace(args.sql))
    return 0


if __name__ == "__main__":
    sys.exit(main())
