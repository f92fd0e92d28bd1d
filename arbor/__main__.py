"""
Command line entry point: evaluate one JSON expression tree.

    arbor program.json
    parse -a < program.src | arbor

The rendered result goes to standard output. Any failure is reported on
standard error as `Error: <message>` with exit status 1.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from arbor import config
from arbor.errors import ArborError
from arbor.interpreter import Interpreter
from arbor.runtime_context import set_strict_identifiers

logger = logging.getLogger("arbor")


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="arbor",
        description="Evaluate an Arbor expression tree given as JSON.",
    )
    parser.add_argument(
        "program",
        nargs="?",
        help="JSON document to evaluate (default: read standard input)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.get_strict_identifiers(),
        help="fail on unbound identifiers instead of treating them as strings "
             "(env: ARBOR_STRICT_IDENTIFIERS)",
    )
    parser.add_argument(
        "--recursion-limit",
        type=positive_int,
        metavar="N",
        help="Python recursion limit for deeply nested programs (env: ARBOR_RECURSION_LIMIT)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug information to standard error",
    )
    return parser


def read_program(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(name)s: %(levelname)s: %(message)s")
    limit = args.recursion_limit
    if limit is None:
        try:
            limit = config.get_recursion_limit()
        except ValueError as e:
            parser.error(str(e))
    if limit is not None:
        logger.debug("recursion limit set to %d", limit)
        try:
            sys.setrecursionlimit(limit)
        except RecursionError as e:
            parser.error(f"--recursion-limit: {e}")
    set_strict_identifiers(args.strict)

    try:
        source = read_program(args.program)
        output = Interpreter().run(source)
    except ArborError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: maximum evaluation depth exceeded", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read program: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
