"""
Bite command-line tool.

Parse, convert and slice textual byte sequences.

Usage::

    bite parse "6d 65 73 73 61 67 65" -f h
    bite int "b0 00 00 00" -f hl
    bite text "6d 65 73 73 61 67 65" -f hl
    bite drop message 2
    bite take ffffffff 4 -f h
    bite from-int 256
    bite literal "~b(6d 65)h"

Flags:
    h  digit-tokens are hexadecimal text
    l  the first digit-token is the least significant one
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import config
from .converter import to_integer, to_text
from .literal import parse_literal
from .parser import consume
from .slicer import drop, from_integer, take
from .types import BiteError, ByteValue

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the command-line tool with optional colors."""
    level = config.log_level(verbose)

    handler = logging.StreamHandler()
    handler.setLevel(level)

    # Colors are off in the test environment so output is stable.
    if no_color or config.BITE_ENV == "test":
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        formatter = ColoredFormatter()

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def describe(value: ByteValue) -> list[str]:
    """Return the lines printed for a parsed value."""
    return [
        f"Literal: {value.to_literal()}",
        f"Base: {value.base}",
        f"Endian: {value.endian.value}",
        f"Digits: {' '.join(str(digit) for digit in value.digits)}",
    ]


def cmd_parse(args: argparse.Namespace) -> list[str]:
    return describe(consume(args.text, args.flags))


def cmd_int(args: argparse.Namespace) -> list[str]:
    return [str(to_integer(consume(args.text, args.flags)))]


def cmd_text(args: argparse.Namespace) -> list[str]:
    return [to_text(consume(args.text, args.flags))]


def cmd_drop(args: argparse.Namespace) -> list[str]:
    if not args.flags:
        return [drop(args.text, args.n)]
    return [drop(consume(args.text, args.flags), args.n).to_literal()]


def cmd_take(args: argparse.Namespace) -> list[str]:
    return describe(take(args.text, args.n, args.flags))


def cmd_from_int(args: argparse.Namespace) -> list[str]:
    return [from_integer(args.n).hex(" ")]


def cmd_literal(args: argparse.Namespace) -> list[str]:
    return describe(parse_literal(args.literal))


def _add_flags_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-f",
        "--flags",
        default="",
        help="flag characters: h (hex), l (little endian), e.g. 'hl'",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="bite",
        description="Parse, convert and slice textual byte sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable colored logging output")

    sp = parser.add_subparsers(dest="cmd", required=True)

    p = sp.add_parser("parse", help="parse text and show the resulting value")
    p.add_argument("text")
    _add_flags_arg(p)
    p.set_defaults(func=cmd_parse)

    p = sp.add_parser("int", help="sum the byte values of the parsed text")
    p.add_argument("text")
    _add_flags_arg(p)
    p.set_defaults(func=cmd_int)

    p = sp.add_parser("text", help="interpret the parsed bytes as characters")
    p.add_argument("text")
    _add_flags_arg(p)
    p.set_defaults(func=cmd_text)

    p = sp.add_parser("drop", help="drop leading bytes (or most significant tokens with flags)")
    p.add_argument("text")
    p.add_argument("n", type=int)
    _add_flags_arg(p)
    p.set_defaults(func=cmd_drop)

    p = sp.add_parser("take", help="parse the first N raw bytes of the text")
    p.add_argument("text")
    p.add_argument("n", type=int)
    _add_flags_arg(p)
    p.set_defaults(func=cmd_take)

    p = sp.add_parser("from-int", help="encode an integer as minimal big endian bytes")
    p.add_argument("n", type=int)
    p.set_defaults(func=cmd_from_int)

    p = sp.add_parser("literal", help="parse a rendered ~b(...) literal")
    p.add_argument("literal")
    p.set_defaults(func=cmd_literal)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        lines = args.func(args)
    except BiteError as e:
        logger.error("%s", e)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
